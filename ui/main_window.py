"""Main application window with sidebar navigation."""

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QPushButton, QStackedWidget, QLabel, QFrame,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from core.config import APP_NAME, APP_VERSION, AppConfig
from core.merge_client import MergeClient
from ui.merge_widget import MergeWidget
from ui.settings_widget import SettingsWidget
from ui.theme import ThemeManager
from i18n import t


class MainWindow(QMainWindow):
    """Main window with sidebar navigation and stacked content area."""

    def __init__(self, config: AppConfig, theme_manager: ThemeManager):
        super().__init__()
        self._config = config
        self._theme_manager = theme_manager
        self._nav_buttons = []
        self._setup_ui()
        self._setup_menu_bar()
        self._switch_tab(0)

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(820, 620)
        self.resize(960, 700)

        central = QWidget()
        self.setCentralWidget(central)

        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        sidebar = self._create_sidebar()
        main_layout.addWidget(sidebar)

        self._stack = QStackedWidget()
        self._stack.setObjectName("contentArea")

        self._merge_widget = MergeWidget(
            MergeClient(self._config.api_url, generic_error=t("merge.failed"))
        )
        self._settings_widget = SettingsWidget(self._config, theme_manager=self._theme_manager)

        self._stack.addWidget(self._merge_widget)     # 0
        self._stack.addWidget(self._settings_widget)  # 1

        main_layout.addWidget(self._stack, 1)

    def _create_sidebar(self) -> QWidget:
        sidebar = QFrame()
        sidebar.setObjectName("sidebar")
        sidebar.setFixedWidth(200)

        layout = QVBoxLayout(sidebar)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        title = QLabel(APP_NAME)
        title.setObjectName("appTitle")
        layout.addWidget(title)

        subtitle = QLabel(t("app.tagline"))
        subtitle.setObjectName("appSubtitle")
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        layout.addSpacing(8)

        nav_items = [
            (t("nav.merge"), 0),
            (t("nav.settings"), 1),
        ]

        for label, index in nav_items:
            btn = QPushButton(f"  {label}")
            btn.setProperty("class", "navButton")
            btn.setFixedHeight(48)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda checked, i=index: self._switch_tab(i))
            layout.addWidget(btn)
            self._nav_buttons.append(btn)

        layout.addStretch()

        version = QLabel(f"v{APP_VERSION}")
        version.setObjectName("versionLabel")
        layout.addWidget(version)

        return sidebar

    def _switch_tab(self, index: int):
        self._stack.setCurrentIndex(index)
        for i, btn in enumerate(self._nav_buttons):
            btn.setProperty("active", "true" if i == index else "false")
            btn.style().unpolish(btn)
            btn.style().polish(btn)

    def _setup_menu_bar(self):
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu(t("menu.file"))
        add_action = QAction(t("menu.add_files"), self)
        add_action.setShortcut("Ctrl+O")
        add_action.triggered.connect(self._add_files)
        file_menu.addAction(add_action)

        merge_action = QAction(t("merge.button"), self)
        merge_action.setShortcut("Ctrl+M")
        merge_action.triggered.connect(self._merge_widget.start_merge)
        file_menu.addAction(merge_action)

        clear_action = QAction(t("file_list.clear_all"), self)
        clear_action.triggered.connect(self._merge_widget.clear_all)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()
        quit_action = QAction(t("menu.quit"), self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # View menu
        view_menu = menu_bar.addMenu(t("menu.view"))
        toggle_theme = QAction(t("menu.toggle_dark"), self)
        toggle_theme.setShortcut("Ctrl+D")
        toggle_theme.triggered.connect(self._toggle_theme)
        view_menu.addAction(toggle_theme)

        # Navigate
        nav_menu = menu_bar.addMenu(t("menu.navigate"))

        nav_actions = [
            (t("nav.merge"), "Ctrl+1", 0),
            (t("nav.settings"), "Ctrl+,", 1),
        ]

        for label, shortcut, index in nav_actions:
            action = QAction(label, self)
            action.setShortcut(shortcut)
            action.triggered.connect(lambda checked, i=index: self._switch_tab(i))
            nav_menu.addAction(action)

    def _add_files(self):
        self._switch_tab(0)
        self._merge_widget.browse_files()

    def _toggle_theme(self):
        self._theme_manager.toggle_theme()

    def closeEvent(self, event):
        """Wait for an in-flight merge before closing."""
        self._merge_widget.cleanup()
        event.accept()
