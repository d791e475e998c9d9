"""QApplication bootstrap."""

import sys

from PyQt6.QtWidgets import QApplication

from chapteredit.config.constants import APP_NAME, ORG_DOMAIN, ORG_NAME
from chapteredit.main_window import MainWindow


def main() -> None:
    """Launch the application."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    app.setOrganizationDomain(ORG_DOMAIN)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
