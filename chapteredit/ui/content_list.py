"""ContentList — ordered list of collapsible content groups."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from chapteredit.config.constants import ADD_CONTENT_TEXT, CONTENT_ITEM_TITLE
from chapteredit.ui.collapsible_group import CollapsibleGroup

ItemFactory = Callable[[int], CollapsibleGroup]


def _default_factory(index: int) -> CollapsibleGroup:
    return CollapsibleGroup(f"{CONTENT_ITEM_TITLE} {index + 1}")


class ContentList(QWidget):
    """Holds content groups in display order, with an "Add" button below.

    Signals
    -------
    item_added(CollapsibleGroup)
        Emitted with a group right after it has been inserted.
    item_removed(CollapsibleGroup)
        Emitted with a group right after it has been detached.
    items_changed()
        Emitted after any insertion or removal.
    """

    item_added = pyqtSignal(object)
    item_removed = pyqtSignal(object)
    items_changed = pyqtSignal()

    def __init__(
        self,
        item_factory: ItemFactory | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._item_factory = item_factory or _default_factory
        self._items: list[CollapsibleGroup] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._items_layout = QVBoxLayout()
        self._items_layout.setSpacing(2)
        layout.addLayout(self._items_layout)

        self._add_btn = QPushButton(ADD_CONTENT_TEXT)
        self._add_btn.clicked.connect(self._on_add_clicked)
        layout.addWidget(self._add_btn)

    # --- queries ---

    @property
    def items(self) -> list[CollapsibleGroup]:
        """Return the groups in display order."""
        return list(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def index_of(self, group: CollapsibleGroup) -> int:
        for i, item in enumerate(self._items):
            if item is group:
                return i
        return -1

    def for_each_child(self, callback: Callable[[CollapsibleGroup, int], object]) -> None:
        """Call *callback(group, index)* for every group, in display order."""
        for index, group in enumerate(list(self._items)):
            callback(group, index)

    # --- mutations ---

    def add_item(self) -> CollapsibleGroup:
        """Create a group through the item factory and append it."""
        group = self._item_factory(len(self._items))
        self.insert_item(group, len(self._items))
        return group

    def insert_item(self, group: CollapsibleGroup, index: int) -> None:
        """Insert an existing *group* at *index*.

        Raises ``ValueError`` if *group* is already in the list.
        """
        if self.index_of(group) >= 0:
            raise ValueError(f"group {group.title!r} is already in the list")
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, group)
        self._items_layout.insertWidget(index, group)
        self.item_added.emit(group)
        self.items_changed.emit()

    def remove_item(self, group: CollapsibleGroup) -> CollapsibleGroup | None:
        """Detach *group* from the list. Returns it, or None if absent."""
        idx = self.index_of(group)
        if idx < 0:
            return None
        self._items.pop(idx)
        self._items_layout.removeWidget(group)
        group.setParent(None)
        self.item_removed.emit(group)
        self.items_changed.emit()
        return group

    # --- internal ---

    def _on_add_clicked(self) -> None:
        self.add_item()
