"""Settings page widget."""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGroupBox,
    QFileDialog, QScrollArea, QComboBox, QMessageBox, QLineEdit,
)
from PyQt6.QtCore import QSettings

from core.config import ORG_NAME, APP_NAME, API_URL_SETTING, AppConfig, normalize_api_url
from i18n import t, LANGUAGES, current_language, set_language


class SettingsWidget(QWidget):
    """Settings page: theme, language, download folder, merge service URL."""

    def __init__(self, config: AppConfig, theme_manager=None, parent=None):
        super().__init__(parent)
        self._config = config
        self._theme_manager = theme_manager
        self._settings = QSettings(ORG_NAME, APP_NAME)
        self._setup_ui()

    def _setup_ui(self):
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        title = QLabel(t("settings.title"))
        title.setProperty("class", "sectionTitle")
        layout.addWidget(title)

        # Appearance
        appearance_group = QGroupBox(t("settings.appearance"))
        appearance_layout = QVBoxLayout(appearance_group)

        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel(t("settings.theme")))
        self._theme_btn = QPushButton(t("settings.switch_dark"))
        self._theme_btn.setProperty("class", "secondaryButton")
        self._theme_btn.clicked.connect(self._toggle_theme)
        theme_row.addWidget(self._theme_btn)
        theme_row.addStretch()
        appearance_layout.addLayout(theme_row)

        layout.addWidget(appearance_group)

        # Language
        lang_group = QGroupBox(t("settings.language_group"))
        lang_layout = QHBoxLayout(lang_group)
        lang_layout.addWidget(QLabel(t("settings.language_label")))
        self._lang_combo = QComboBox()
        cur = current_language()
        for code, name in LANGUAGES.items():
            self._lang_combo.addItem(name, code)
            if code == cur:
                self._lang_combo.setCurrentIndex(self._lang_combo.count() - 1)
        self._lang_combo.currentIndexChanged.connect(self._on_language_changed)
        lang_layout.addWidget(self._lang_combo)
        lang_layout.addStretch()
        layout.addWidget(lang_group)

        # Download folder
        output_group = QGroupBox(t("settings.output_folder"))
        output_layout = QVBoxLayout(output_group)

        folder_row = QHBoxLayout()
        self._folder_label = QLabel(
            self._settings.value("output_folder", t("settings.default_downloads"))
        )
        self._folder_label.setProperty("class", "textSecondary")
        folder_row.addWidget(self._folder_label, 1)

        browse_btn = QPushButton(t("common.browse"))
        browse_btn.setProperty("class", "secondaryButton")
        browse_btn.clicked.connect(self._browse_folder)
        folder_row.addWidget(browse_btn)

        reset_btn = QPushButton(t("common.reset"))
        reset_btn.setProperty("class", "secondaryButton")
        reset_btn.clicked.connect(self._reset_folder)
        folder_row.addWidget(reset_btn)

        output_layout.addLayout(folder_row)
        layout.addWidget(output_group)

        # Merge service
        service_group = QGroupBox(t("settings.service_group"))
        service_layout = QVBoxLayout(service_group)

        self._active_url_label = QLabel(t("settings.service_active", url=self._config.api_url))
        self._active_url_label.setProperty("class", "textSecondary")
        self._active_url_label.setWordWrap(True)
        service_layout.addWidget(self._active_url_label)

        url_row = QHBoxLayout()
        self._url_edit = QLineEdit(self._settings.value(API_URL_SETTING, ""))
        self._url_edit.setPlaceholderText(self._config.api_url)
        url_row.addWidget(self._url_edit, 1)

        save_url_btn = QPushButton(t("common.save"))
        save_url_btn.setProperty("class", "secondaryButton")
        save_url_btn.clicked.connect(self._save_api_url)
        url_row.addWidget(save_url_btn)

        service_layout.addLayout(url_row)
        layout.addWidget(service_group)

        # About
        about_group = QGroupBox(t("settings.about"))
        about_layout = QVBoxLayout(about_group)
        about_text = QLabel(t("settings.about_text"))
        about_text.setWordWrap(True)
        about_text.setProperty("class", "textSecondary")
        about_layout.addWidget(about_text)
        layout.addWidget(about_group)

        layout.addStretch()

        scroll.setWidget(container)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(scroll)

        self._update_theme_button()

    def _toggle_theme(self):
        if self._theme_manager:
            self._theme_manager.toggle_theme()
            self._update_theme_button()

    def _update_theme_button(self):
        if self._theme_manager:
            if self._theme_manager.is_dark():
                self._theme_btn.setText(t("settings.switch_light"))
            else:
                self._theme_btn.setText(t("settings.switch_dark"))

    def _on_language_changed(self, index: int):
        code = self._lang_combo.currentData()
        if code and code != current_language():
            set_language(code)
            QMessageBox.information(
                self, t("settings.restart_title"), t("settings.restart_msg"),
            )

    def _browse_folder(self):
        folder = QFileDialog.getExistingDirectory(self, t("settings.select_folder"))
        if folder:
            self._settings.setValue("output_folder", folder)
            self._folder_label.setText(folder)

    def _reset_folder(self):
        self._settings.remove("output_folder")
        self._folder_label.setText(t("settings.default_downloads"))

    def _save_api_url(self):
        text = self._url_edit.text().strip()
        if not text:
            self._settings.remove(API_URL_SETTING)
        else:
            try:
                url = normalize_api_url(text)
            except ValueError as e:
                QMessageBox.warning(self, t("settings.service_group"), str(e))
                return
            self._settings.setValue(API_URL_SETTING, url)
            self._url_edit.setText(url)
        QMessageBox.information(
            self, t("settings.restart_title"), t("settings.restart_msg"),
        )
