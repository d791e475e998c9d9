"""Shared pytest fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from pytestqt.qtbot import QtBot

from chapteredit.core.single_expansion import SingleExpansionCoordinator
from chapteredit.main_window import MainWindow
from chapteredit.ui.chapter_field import ChapterField
from chapteredit.ui.content_list import ContentList


@pytest.fixture()
def main_window(qtbot: QtBot) -> MainWindow:
    """Create a MainWindow instance managed by qtbot."""
    window = MainWindow()
    qtbot.addWidget(window)
    return window


@pytest.fixture()
def content_list(qtbot: QtBot) -> ContentList:
    """Create a ContentList holding three groups."""
    lst = ContentList()
    qtbot.addWidget(lst)
    for _ in range(3):
        lst.add_item()
    return lst


@pytest.fixture()
def coordinator(content_list: ContentList) -> SingleExpansionCoordinator:
    """Create a dormant coordinator bound to *content_list*."""
    return SingleExpansionCoordinator(content_list)


@pytest.fixture()
def chapter(qtbot: QtBot) -> ChapterField:
    """Create a ChapterField with a title and three valid content groups."""
    field = ChapterField(
        params={
            "title": "Introduction",
            "content": [{"title": "Welcome"}, {"title": "Goals"}, {"title": "Outline"}],
        }
    )
    qtbot.addWidget(field)
    return field
