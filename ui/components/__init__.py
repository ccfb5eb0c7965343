"""Reusable UI components."""

from ui.components.drop_zone import DropZone
from ui.components.error_banner import ErrorBanner
from ui.components.file_list_widget import FileListWidget
from ui.components.progress_widget import ProgressWidget
from ui.components.result_card import ResultCard
