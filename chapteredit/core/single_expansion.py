"""SingleExpansionCoordinator — keeps at most one content group expanded."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from chapteredit.core.collapse_override import install_unconditional_collapse
from chapteredit.ui.collapsible_group import CollapsibleGroup

if TYPE_CHECKING:
    from chapteredit.ui.content_list import ContentList

log = logging.getLogger(__name__)


class SingleExpansionCoordinator(QObject):
    """Enforces "one open at a time" over the groups of a :class:`ContentList`.

    The coordinator stays dormant until :meth:`activate_once` is called,
    which happens the first time the surrounding chapter section is
    expanded. From then on every group in the list, including groups added
    later, collapses unconditionally and collapses its siblings when it is
    expanded.

    A coordinator constructed without a content list is disabled and
    ignores every request.

    Signals
    -------
    activated()
        Emitted once, after the existing groups have been instrumented.
    """

    activated = pyqtSignal()

    def __init__(self, content_list: ContentList | None, parent: QObject | None = None) -> None:
        # the list owns the coordinator unless another parent is given
        super().__init__(parent if parent is not None else content_list)
        self._content_list = content_list
        self._active = False
        self._instrumented: set[CollapsibleGroup] = set()

    # --- queries ---

    @property
    def enabled(self) -> bool:
        return self._content_list is not None

    @property
    def is_active(self) -> bool:
        return self._active

    def is_instrumented(self, group: CollapsibleGroup) -> bool:
        return group in self._instrumented

    # --- lifecycle ---

    def activate_once(self) -> bool:
        """Instrument the list on the first call. Returns True if it did."""
        if self._content_list is None or self._active:
            return False
        self._active = True

        self._content_list.for_each_child(self._instrument)
        items = self._content_list.items
        keep = items[0] if items else None
        self._open_exclusively(keep)

        self._content_list.item_added.connect(self.on_item_inserted)
        self._content_list.item_removed.connect(self._on_item_removed)
        log.debug("Single expansion activated over %d content group(s)", len(items))
        self.activated.emit()
        return True

    def release(self) -> None:
        """Drop all references to the list and its groups."""
        if self._content_list is not None and self._active:
            self._content_list.item_added.disconnect(self.on_item_inserted)
            self._content_list.item_removed.disconnect(self._on_item_removed)
        for group in list(self._instrumented):
            self._forget(group)
        self._content_list = None

    # --- reactions ---

    def on_item_inserted(self, group: CollapsibleGroup) -> None:
        """Instrument a group added after activation and make it the open one."""
        if self._content_list is None or not self._active:
            return
        self._instrument(group)
        self._open_exclusively(group)

    def collapse_all_except(
        self, keep: CollapsibleGroup | Iterable[CollapsibleGroup] | None = None
    ) -> None:
        """Collapse every group in the list that is not in *keep*.

        Membership is read once, at the start of the sweep.
        """
        if self._content_list is None:
            return
        if keep is None:
            excluded: list[CollapsibleGroup] = []
        elif isinstance(keep, CollapsibleGroup):
            excluded = [keep]
        else:
            excluded = list(keep)

        for group in self._content_list.items:
            if any(group is kept for kept in excluded):
                continue
            group.collapse()

    # --- internal ---

    def _open_exclusively(self, group: CollapsibleGroup | None) -> None:
        if group is not None and not group.is_expanded:
            # expanding emits expanded, which runs the sweep
            group.expand()
        else:
            self.collapse_all_except(group)

    def _instrument(self, group: CollapsibleGroup, _index: int = -1) -> None:
        if group in self._instrumented:
            return
        install_unconditional_collapse(group)
        group.expanded.connect(self._on_group_expanded)
        self._instrumented.add(group)
        log.debug("Instrumented content group %r", group.title)

    def _forget(self, group: CollapsibleGroup) -> None:
        if group not in self._instrumented:
            return
        group.expanded.disconnect(self._on_group_expanded)
        self._instrumented.discard(group)

    def _on_group_expanded(self, group: CollapsibleGroup) -> None:
        self.collapse_all_except(group)

    def _on_item_removed(self, group: CollapsibleGroup) -> None:
        self._forget(group)
