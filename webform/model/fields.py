"""Form control models.

Every control kind shares the same small interface: a ``name``, an optional
``value`` and ``query_pairs()``, which returns what the control contributes
to a submitted query on its own. Group policies (radio exclusivity, button
clicks) are applied by :mod:`webform.logic.query`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field as ModelField

Pair = tuple[str, str]


class BaseControl(BaseModel):
    """Base class for all form controls."""

    model_config = ConfigDict(validate_assignment=True)

    kind: str
    name: str = ""
    value: str | None = None

    def query_pairs(self) -> list[Pair]:
        """Return the (name, value) pairs this control submits."""
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{self.name}: {self.value!r}"


class Field(BaseControl):
    """A text-like control: text, password, hidden and int inputs, textarea."""

    kind: Literal["field"] = "field"

    def query_pairs(self) -> list[Pair]:
        if self.value is None:
            return []
        return [(self.name, self.value)]


class SelectList(Field):
    """A select element; ``value`` is the currently selected option."""

    kind: Literal["select"] = "select"  # type: ignore[assignment]
    options: list[str] = []
    multiple: bool = False


class CheckBox(BaseControl):
    kind: Literal["checkbox"] = "checkbox"
    checked: bool = False

    def query_pairs(self) -> list[Pair]:
        if not self.checked:
            return []
        return [(self.name, self.value if self.value is not None else "on")]

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name}: {self.value!r}"


class RadioButton(BaseControl):
    kind: Literal["radio"] = "radio"
    checked: bool = False

    def query_pairs(self) -> list[Pair]:
        if not self.checked:
            return []
        return [(self.name, self.value if self.value is not None else "")]

    def __str__(self) -> str:
        mark = "o" if self.checked else " "
        return f"({mark}) {self.name}: {self.value!r}"


class FileUpload(BaseControl):
    """A file input. Its data travels as a multipart part, never as a pair."""

    kind: Literal["file"] = "file"
    file_name: str = ""
    mime_type: str | None = None
    file_data: bytes = b""

    def query_pairs(self) -> list[Pair]:
        return []

    def __str__(self) -> str:
        return f"{self.name}: {self.file_name!r} ({len(self.file_data)} bytes)"


class Button(BaseControl):
    """A submit button, contributing only once clicked."""

    kind: Literal["button"] = "button"

    def query_pairs(self) -> list[Pair]:
        if not self.name:
            return []
        return [(self.name, self.value if self.value is not None else "")]


class ImageButton(Button):
    """An image submit button, which also submits the click coordinates."""

    kind: Literal["image"] = "image"  # type: ignore[assignment]
    x: int = 0
    y: int = 0

    def query_pairs(self) -> list[Pair]:
        pairs = super().query_pairs()
        if pairs:
            pairs.append((f"{self.name}.x", str(self.x)))
            pairs.append((f"{self.name}.y", str(self.y)))
        return pairs


Control = Annotated[
    Union[Field, SelectList, CheckBox, RadioButton, FileUpload, Button, ImageButton],
    ModelField(discriminator="kind"),
]
