"""Tests for ContentList."""

import pytest
from pytestqt.qtbot import QtBot

from chapteredit.ui.collapsible_group import CollapsibleGroup
from chapteredit.ui.content_list import ContentList


def test_add_item_appends_and_emits(qtbot: QtBot) -> None:
    lst = ContentList()
    qtbot.addWidget(lst)
    with qtbot.waitSignal(lst.item_added) as blocker:
        group = lst.add_item()
    assert blocker.args == [group]
    assert lst.count == 1
    assert lst.items == [group]
    assert group.title == "Content 1"


def test_add_button_adds_item(qtbot: QtBot) -> None:
    lst = ContentList()
    qtbot.addWidget(lst)
    lst._add_btn.click()
    lst._add_btn.click()
    assert lst.count == 2
    assert lst.items[1].title == "Content 2"


def test_custom_factory(qtbot: QtBot) -> None:
    lst = ContentList(lambda index: CollapsibleGroup(f"Page {index}"))
    qtbot.addWidget(lst)
    assert lst.add_item().title == "Page 0"


def test_insert_item_at_index(qtbot: QtBot, content_list: ContentList) -> None:
    group = CollapsibleGroup("Inserted")
    content_list.insert_item(group, 1)
    assert content_list.index_of(group) == 1
    assert content_list.count == 4


def test_insert_index_clamped(qtbot: QtBot, content_list: ContentList) -> None:
    group = CollapsibleGroup("Last")
    content_list.insert_item(group, 99)
    assert content_list.items[-1] is group


def test_remove_item(content_list: ContentList, qtbot: QtBot) -> None:
    second = content_list.items[1]
    with qtbot.waitSignal(content_list.item_removed) as blocker:
        removed = content_list.remove_item(second)
    assert removed is second
    assert blocker.args == [second]
    assert content_list.index_of(second) == -1
    assert content_list.count == 2
    second.deleteLater()


def test_remove_missing_item_returns_none(content_list: ContentList, qtbot: QtBot) -> None:
    stranger = CollapsibleGroup("Stranger")
    qtbot.addWidget(stranger)
    with qtbot.assertNotEmitted(content_list.item_removed):
        assert content_list.remove_item(stranger) is None


def test_for_each_child_in_display_order(content_list: ContentList) -> None:
    seen: list[tuple[CollapsibleGroup, int]] = []
    content_list.for_each_child(lambda group, index: seen.append((group, index)))
    assert [index for _group, index in seen] == [0, 1, 2]
    assert [group for group, _index in seen] == content_list.items


def test_insert_existing_item_rejected(content_list: ContentList, qtbot: QtBot) -> None:
    first = content_list.items[0]
    with qtbot.assertNotEmitted(content_list.item_added):
        with pytest.raises(ValueError):
            content_list.insert_item(first, 2)
    assert content_list.count == 3
    assert content_list.index_of(first) == 0
