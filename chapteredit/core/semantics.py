"""Field semantics describing the chapter form."""

from __future__ import annotations

from dataclasses import dataclass, field

from chapteredit.config.constants import CONTENT_FIELD_NAME


@dataclass
class FieldSpec:
    """Lightweight description of one form field.

    A ``FieldSpec`` is *not* a widget; it is metadata that the form builders
    use to create the matching editor widget and to look fields up by name.
    """

    name: str
    type: str
    label: str = ""
    optional: bool = False
    fields: list[FieldSpec] = field(default_factory=list)

    def index_of(self, name: str) -> int:
        """Return the index of the nested field called *name*, or -1."""
        for i, spec in enumerate(self.fields):
            if spec.name == name:
                return i
        return -1


CONTENT_ITEM_SEMANTICS = FieldSpec(
    name="contentItem",
    type="group",
    label="Content",
    fields=[
        FieldSpec(name="title", type="text", label="Title"),
        FieldSpec(name="text", type="text", label="Text", optional=True),
    ],
)

CHAPTER_SEMANTICS = FieldSpec(
    name="chapter",
    type="group",
    label="Chapter",
    fields=[
        FieldSpec(name="title", type="text", label="Chapter title"),
        FieldSpec(
            name=CONTENT_FIELD_NAME,
            type="list",
            label="Content",
            fields=[CONTENT_ITEM_SEMANTICS],
        ),
    ],
)
