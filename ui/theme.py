"""Light and dark stylesheets for the merge window."""

import logging

from PyQt6.QtCore import QSettings

from core.config import ORG_NAME, APP_NAME
from core.utils import get_asset_path

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEME_SETTING = "theme"

# Theme name -> stylesheet under assets/styles/
THEMES = {
    LIGHT: "light.qss",
    DARK: "dark.qss",
}


def resolve_theme(value) -> str:
    """Map a stored preference onto a known theme; anything else is light."""
    return value if value in THEMES else LIGHT


def stylesheet_for(theme: str) -> str:
    """QSS text for theme, or "" when the stylesheet is not shipped."""
    qss_path = get_asset_path(f"assets/styles/{THEMES[resolve_theme(theme)]}")
    try:
        with open(qss_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.warning("Stylesheet missing: %s", qss_path)
        return ""


class ThemeManager:
    """Applies the saved theme to the application and flips it on request."""

    def __init__(self, app, settings=None):
        self._app = app
        self._settings = settings or QSettings(ORG_NAME, APP_NAME)
        self._current_theme = resolve_theme(self._settings.value(THEME_SETTING, LIGHT))

    def apply_theme(self, theme: str = None):
        if theme:
            self._current_theme = resolve_theme(theme)
        self._app.setStyleSheet(stylesheet_for(self._current_theme))
        self._settings.setValue(THEME_SETTING, self._current_theme)
        logger.debug("Applied %s theme", self._current_theme)

    def toggle_theme(self) -> str:
        """Switch between light and dark. Returns the new theme name."""
        self.apply_theme(DARK if self._current_theme == LIGHT else LIGHT)
        return self._current_theme

    def current_theme(self) -> str:
        return self._current_theme

    def is_dark(self) -> bool:
        return self._current_theme == DARK
