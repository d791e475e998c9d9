"""ChapterField — chapter form whose content list keeps one group open."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QLayout, QLineEdit, QVBoxLayout, QWidget

from chapteredit.config.constants import CHAPTER_TITLE, CONTENT_FIELD_NAME, CONTENT_ITEM_TITLE
from chapteredit.core.semantics import CHAPTER_SEMANTICS, FieldSpec
from chapteredit.core.single_expansion import SingleExpansionCoordinator
from chapteredit.ui.collapsible_group import CollapsibleGroup
from chapteredit.ui.content_list import ContentList

log = logging.getLogger(__name__)


def _text_widget(group: CollapsibleGroup, name: str) -> QLineEdit | None:
    for spec, widget in zip(group.fields, group.field_widgets):
        if spec.name == name and isinstance(widget, QLineEdit):
            return widget
    return None


def _required_text_filled(group: CollapsibleGroup) -> bool:
    for spec, widget in zip(group.fields, group.field_widgets):
        if spec.type == "text" and not spec.optional and isinstance(widget, QLineEdit):
            if not widget.text().strip():
                return False
    return True


class ChapterField(QWidget):
    """Composite chapter editor built from field semantics.

    The chapter itself is a collapsible group that starts collapsed. The
    first time the user expands it, the content list is handed to a
    :class:`SingleExpansionCoordinator`.

    Signals
    -------
    changed(dict)
        Emitted with the current parameters after any edit.
    """

    changed = pyqtSignal(dict)

    def __init__(
        self,
        semantics: FieldSpec = CHAPTER_SEMANTICS,
        params: dict[str, Any] | None = None,
        *,
        single_expansion: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._semantics = semantics
        self._updating = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._group = CollapsibleGroup(semantics.label or CHAPTER_TITLE)
        for spec in semantics.fields:
            self._group.add_field(spec, self._build_field(spec))
        self._group.set_validator(self.validate)
        self._group.apply_presentation(False)
        layout.addWidget(self._group)

        if params:
            self.set_params(params)

        self._content_list = self._locate_content_list()
        managed = self._content_list if single_expansion else None
        self._coordinator = SingleExpansionCoordinator(managed, self)
        if self._coordinator.enabled:
            self._group.expanded.connect(self._on_chapter_expanded)

    # --- queries ---

    @property
    def group(self) -> CollapsibleGroup:
        return self._group

    @property
    def coordinator(self) -> SingleExpansionCoordinator:
        return self._coordinator

    @property
    def content_list(self) -> ContentList | None:
        """Return the located content list, or None when the chapter has none."""
        return self._content_list

    @property
    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        for spec, widget in zip(self._group.fields, self._group.field_widgets):
            if isinstance(widget, QLineEdit):
                params[spec.name] = widget.text()
            elif isinstance(widget, ContentList):
                params[spec.name] = [self._group_params(g) for g in widget.items]
        return params

    def validate(self) -> bool:
        """Return True when the chapter and all of its content groups are valid."""
        valid = _required_text_filled(self._group)
        for widget in self._group.field_widgets:
            if isinstance(widget, ContentList):
                valid = all(g.validate() for g in widget.items) and valid
        return valid

    # --- mutations ---

    def set_params(self, params: dict[str, Any]) -> None:
        """Replace the field values with *params*."""
        self._updating = True
        try:
            for spec, widget in zip(self._group.fields, self._group.field_widgets):
                value = params.get(spec.name)
                if isinstance(widget, QLineEdit):
                    widget.setText(str(value or ""))
                elif isinstance(widget, ContentList):
                    for group in widget.items:
                        widget.remove_item(group)
                    for entry in value or []:
                        group = widget.add_item()
                        self._set_group_params(group, entry)
        finally:
            self._updating = False
        self._on_field_changed()

    def append_to(self, layout: QLayout) -> None:
        layout.addWidget(self)

    def remove(self) -> None:
        """Detach from the parent layout and release the coordinator."""
        self._coordinator.release()
        self.setParent(None)
        self.deleteLater()

    # --- building ---

    def _build_field(self, spec: FieldSpec) -> QWidget:
        if spec.type == "list":
            item_spec = spec.fields[0] if spec.fields else None
            content_list = ContentList(lambda index: self._build_item(item_spec, index))
            content_list.items_changed.connect(self._on_field_changed)
            return content_list
        edit = QLineEdit()
        edit.textChanged.connect(self._on_field_changed)
        return edit

    def _build_item(self, spec: FieldSpec | None, index: int) -> CollapsibleGroup:
        title = spec.label if spec is not None and spec.label else CONTENT_ITEM_TITLE
        group = CollapsibleGroup(f"{title} {index + 1}")
        if spec is not None:
            for field_spec in spec.fields:
                group.add_field(field_spec, self._build_field(field_spec))
        group.set_validator(lambda: _required_text_filled(group))
        return group

    def _locate_content_list(self) -> ContentList | None:
        index = self._semantics.index_of(CONTENT_FIELD_NAME)
        widgets = self._group.field_widgets
        widget = widgets[index] if 0 <= index < len(widgets) else None
        if isinstance(widget, ContentList):
            return widget
        log.warning(
            "No %r list in chapter %r, single expansion disabled",
            CONTENT_FIELD_NAME,
            self._semantics.name,
        )
        return None

    @staticmethod
    def _group_params(group: CollapsibleGroup) -> dict[str, str]:
        return {
            spec.name: widget.text()
            for spec, widget in zip(group.fields, group.field_widgets)
            if isinstance(widget, QLineEdit)
        }

    @staticmethod
    def _set_group_params(group: CollapsibleGroup, entry: dict[str, Any]) -> None:
        for name, value in entry.items():
            edit = _text_widget(group, name)
            if edit is not None:
                edit.setText(str(value))

    # --- handlers ---

    def _on_chapter_expanded(self, _group: CollapsibleGroup) -> None:
        self._coordinator.activate_once()

    def _on_field_changed(self, *_args: object) -> None:
        if self._updating:
            return
        self.changed.emit(self.params)
