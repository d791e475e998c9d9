"""MainWindow — top-level window hosting the chapter editor."""

from __future__ import annotations

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QScrollArea, QVBoxLayout, QWidget

from chapteredit.config.constants import APP_NAME, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from chapteredit.config.settings import AppSettings
from chapteredit.ui.chapter_field import ChapterField


class MainWindow(QMainWindow):
    """Primary application window with one chapter form."""

    def __init__(self) -> None:
        super().__init__()
        self._settings = AppSettings()
        self.setWindowTitle(APP_NAME)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        container = QWidget()
        self._main_layout = QVBoxLayout(container)

        self._chapter = ChapterField(
            single_expansion=self._settings.single_expansion_enabled()
        )
        self._chapter.append_to(self._main_layout)
        self._main_layout.addStretch()

        scroll.setWidget(container)
        self.setCentralWidget(scroll)

        geometry = self._settings.window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)

    @property
    def chapter(self) -> ChapterField:
        return self._chapter

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        self._settings.save_window_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
