"""Unconditional collapse strategy for content groups.

A group's default collapse refuses to close while its fields fail
validation. Groups managed by the single-expansion coordinator must always
close, so the coordinator swaps in :func:`unconditional_collapse`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chapteredit.ui.collapsible_group import CollapsibleGroup


def unconditional_collapse(group: CollapsibleGroup) -> None:
    """Collapse *group* without consulting its validator."""
    group.apply_presentation(False)
    group.collapsed.emit(group)


def has_unconditional_collapse(group: CollapsibleGroup) -> bool:
    return group.collapse_strategy is unconditional_collapse


def install_unconditional_collapse(group: CollapsibleGroup) -> bool:
    """Replace the collapse strategy of *group*.

    Returns ``True`` if the strategy was installed, ``False`` if it was
    already in place.
    """
    if has_unconditional_collapse(group):
        return False
    group.set_collapse_strategy(unconditional_collapse)
    return True
