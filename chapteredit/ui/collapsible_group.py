"""CollapsibleGroup — collapsible form group with a replaceable collapse strategy."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFormLayout, QPushButton, QVBoxLayout, QWidget

from chapteredit.config.constants import (
    ACCESSIBLE_COLLAPSED,
    ACCESSIBLE_EXPANDED,
    ARROW_COLLAPSED,
    ARROW_EXPANDED,
)

if TYPE_CHECKING:
    from chapteredit.core.semantics import FieldSpec

CollapseStrategy = Callable[["CollapsibleGroup"], None]


def validated_collapse(group: CollapsibleGroup) -> None:
    """Default collapse: only collapse when the group's fields validate."""
    if not group.validate():
        return
    group.apply_presentation(False)
    group.collapsed.emit(group)


class CollapsibleGroup(QWidget):
    """A group with a flat toggle button header and collapsible form content.

    Groups start expanded. :meth:`collapse` delegates to the group's
    collapse strategy, which callers may replace with
    :meth:`set_collapse_strategy`.

    Signals
    -------
    expanded(CollapsibleGroup)
        Emitted with the group itself after it has been expanded.
    collapsed(CollapsibleGroup)
        Emitted with the group itself after it has been collapsed.
    """

    expanded = pyqtSignal(object)
    collapsed = pyqtSignal(object)

    def __init__(self, title: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title = title
        self._expanded = True
        self._collapse_strategy: CollapseStrategy = validated_collapse
        self._validator: Callable[[], bool] | None = None
        self._fields: list[FieldSpec] = []
        self._field_widgets: list[QWidget] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._toggle_btn = QPushButton()
        self._toggle_btn.setFlat(True)
        self._toggle_btn.setStyleSheet(
            "QPushButton { text-align: left; font-weight: bold; padding: 4px; }"
        )
        self._toggle_btn.clicked.connect(self._toggle)
        layout.addWidget(self._toggle_btn)

        self._content = QWidget()
        self._form = QFormLayout(self._content)
        self._form.setContentsMargins(8, 4, 8, 4)
        self._form.setFieldGrowthPolicy(QFormLayout.FieldGrowthPolicy.ExpandingFieldsGrow)
        layout.addWidget(self._content)

        self.apply_presentation(True)

    # --- queries ---

    @property
    def title(self) -> str:
        return self._title

    @property
    def is_expanded(self) -> bool:
        return self._expanded

    @property
    def form_layout(self) -> QFormLayout:
        return self._form

    @property
    def fields(self) -> list[FieldSpec]:
        """Return the field semantics, parallel to :attr:`field_widgets`."""
        return list(self._fields)

    @property
    def field_widgets(self) -> list[QWidget]:
        """Return the field widgets in the order they were added."""
        return list(self._field_widgets)

    @property
    def collapse_strategy(self) -> CollapseStrategy:
        return self._collapse_strategy

    # --- fields ---

    def add_row(self, label: str, widget: QWidget) -> None:
        """Add a label + widget row to the content form layout."""
        self._form.addRow(label, widget)

    def add_field(self, spec: FieldSpec, widget: QWidget) -> None:
        """Add a field row and remember its semantics."""
        self._fields.append(spec)
        self._field_widgets.append(widget)
        label = f"{spec.label}:" if spec.label and spec.type != "list" else ""
        if label:
            self.add_row(label, widget)
        else:
            self._form.addRow(widget)

    def set_title(self, title: str) -> None:
        self._title = title
        self._update_header()

    # --- validation ---

    def set_validator(self, validator: Callable[[], bool] | None) -> None:
        self._validator = validator

    def validate(self) -> bool:
        if self._validator is None:
            return True
        return self._validator()

    # --- expansion ---

    def set_collapse_strategy(self, strategy: CollapseStrategy) -> None:
        self._collapse_strategy = strategy

    def expand(self) -> None:
        self.apply_presentation(True)
        self.expanded.emit(self)

    def collapse(self) -> None:
        self._collapse_strategy(self)

    def apply_presentation(self, expanded: bool) -> None:
        """Flip the visual and accessible state without emitting anything."""
        self._expanded = expanded
        self._content.setVisible(expanded)
        self._toggle_btn.setAccessibleDescription(
            ACCESSIBLE_EXPANDED if expanded else ACCESSIBLE_COLLAPSED
        )
        self.setProperty("expanded", expanded)
        style = self.style()
        if style is not None:
            style.unpolish(self)
            style.polish(self)
        self._update_header()

    # --- internal ---

    def _toggle(self) -> None:
        if self._expanded:
            self.collapse()
        else:
            self.expand()

    def _update_header(self) -> None:
        prefix = ARROW_EXPANDED if self._expanded else ARROW_COLLAPSED
        self._toggle_btn.setText(f"{prefix} {self._title}")
