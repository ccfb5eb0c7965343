"""PDphilE - merge PDF files through a remote merge service."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox
from PyQt6.QtCore import QSettings

import i18n
from core.config import (
    ORG_NAME, APP_NAME, APP_VERSION, API_URL_SETTING, load_config,
)
from ui.main_window import MainWindow
from ui.theme import ThemeManager

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="PDphilE - merge PDF files")
    parser.add_argument(
        "--api-url",
        help="Base URL of the merge service (overrides PDPHILE_API_URL and saved settings)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args, _ = parser.parse_known_args(argv)
    return args


def main():
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(ORG_NAME)

    i18n.init()

    stored_url = QSettings(ORG_NAME, APP_NAME).value(API_URL_SETTING, "")
    try:
        config = load_config(args.api_url, stored=stored_url)
    except ValueError as e:
        logger.error("%s", e)
        QMessageBox.critical(None, APP_NAME, str(e))
        sys.exit(2)
    logger.info("Starting %s %s (merge service: %s)", APP_NAME, APP_VERSION, config.api_url)

    # Theme
    theme_manager = ThemeManager(app)
    theme_manager.apply_theme()

    # Main window
    window = MainWindow(config, theme_manager)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
