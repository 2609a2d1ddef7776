"""The form entity: controls parsed from a page plus the submission target.

Badly nested markup can separate a ``<form>`` tag from its controls::

    <td>
      <form>
    </td>
    <td>
      <input .../>
      </form>
    </td>

A form therefore reads its attributes from ``form_node`` and collects its
controls from ``elements_node``. For well-formed markup both are the same
element.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from anystore.logging import get_logger
from banal import is_mapping
from normality import stringify

from webform.core import get_settings
from webform.logic.node import as_node
from webform.logic.parser import parse_controls
from webform.logic.payload import Payload, encode_payload
from webform.logic.query import build_query
from webform.model.fields import (
    Button,
    CheckBox,
    Field,
    FileUpload,
    ImageButton,
    Pair,
    RadioButton,
    SelectList,
)

log = get_logger(__name__)


class Form:
    """An HTML form whose current state can be turned into a request."""

    def __init__(self, form_node: Any, elements_node: Any | None = None) -> None:
        self.form_node = form_node
        self.elements_node = form_node if elements_node is None else elements_node

        node = as_node(form_node)
        self.method: str = (node.get("method") or "GET").upper()
        self.action: str | None = node.get("action")
        self.name: str | None = node.get("name")
        self.enctype: str = node.get("enctype") or get_settings().default_enctype
        self._clicked_buttons: list[Button] = []

        controls = parse_controls(self.elements_node)
        self.fields: list[Field] = controls.fields
        self.buttons: list[Button] = controls.buttons
        self.file_uploads: list[FileUpload] = controls.file_uploads
        self.radiobuttons: list[RadioButton] = controls.radiobuttons
        self.checkboxes: list[CheckBox] = controls.checkboxes

    # lookups

    def field(self, name: str) -> Field | None:
        """Return the first field called ``name``, or None."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def fields_with(self, name: str) -> list[Field]:
        return [f for f in self.fields if f.name == name]

    def select_list(self, name: str) -> SelectList | None:
        for field in self.fields_with(name):
            if isinstance(field, SelectList):
                return field
        return None

    def checkbox(self, name: str, value: str | None = None) -> CheckBox | None:
        for checkbox in self.checkboxes:
            if checkbox.name == name and (value is None or checkbox.value == value):
                return checkbox
        return None

    def radiobuttons_with(self, name: str) -> list[RadioButton]:
        return [r for r in self.radiobuttons if r.name == name]

    def radiobutton(self, name: str, value: str | None = None) -> RadioButton | None:
        for radio in self.radiobuttons_with(name):
            if value is None or radio.value == value:
                return radio
        return None

    def button(self, name: str, value: str | None = None) -> Button | None:
        for button in self.buttons:
            if button.name == name and (value is None or button.value == value):
                return button
        return None

    def file_upload(self, name: str) -> FileUpload | None:
        for upload in self.file_uploads:
            if upload.name == name:
                return upload
        return None

    # mutation

    def set_field(self, name: str, value: str | None) -> bool:
        """Set the value of the first field called ``name``."""
        field = self.field(name)
        if field is None:
            log.warning("Field not found", form=self.name, field=name)
            return False
        field.value = value
        return True

    def fill(self, values: Mapping[str, str | None] | Iterable[Pair]) -> bool:
        """Set several fields at once, from a mapping or a list of pairs.

        Returns True only if every named field was found.
        """
        items = values.items() if is_mapping(values) else values
        found = [self.set_field(name, value) for name, value in items]
        return all(found)

    def _toggle(self, name: str, value: str | None, checked: bool) -> bool:
        checkbox = self.checkbox(name, value)
        if checkbox is None:
            log.warning("Checkbox not found", form=self.name, checkbox=name)
            return False
        checkbox.checked = checked
        return True

    def check(self, name: str, value: str | None = None) -> bool:
        return self._toggle(name, value, True)

    def uncheck(self, name: str, value: str | None = None) -> bool:
        return self._toggle(name, value, False)

    def choose(self, name: str, value: str | None) -> bool:
        """Check the radio button ``value`` of group ``name``, unchecking
        the others in the group."""
        group = self.radiobuttons_with(name)
        if not any(radio.value == value for radio in group):
            log.warning("Radio button not found", form=self.name, radio=name)
            return False
        for radio in group:
            radio.checked = radio.value == value
        return True

    def attach(
        self,
        name: str,
        file_name: str,
        file_data: bytes,
        mime_type: str | None = None,
    ) -> bool:
        """Fill the file upload called ``name``."""
        upload = self.file_upload(name)
        if upload is None:
            log.warning("File upload not found", form=self.name, upload=name)
            return False
        upload.file_name = file_name
        upload.file_data = file_data
        upload.mime_type = stringify(mime_type)
        return True

    def click(self, button: Button | str, x: int = 0, y: int = 0) -> Button | None:
        """Mark a button as clicked, so it is submitted with the query.

        ``button`` is either a button instance or the name of a button in
        this form. For image buttons a copy carrying the click position is
        recorded and returned.
        """
        if not isinstance(button, Button):
            found = self.button(button)
            if found is None:
                log.warning("Button not found", form=self.name, button=button)
                return None
            button = found
        if isinstance(button, ImageButton):
            # each click keeps its own position
            button = button.model_copy(update={"x": x, "y": y})
        self._clicked_buttons.append(button)
        return button

    @property
    def clicked_buttons(self) -> tuple[Button, ...]:
        return tuple(self._clicked_buttons)

    def uniq_fields(self) -> list[Field]:
        """Drop every field whose name already occurred earlier.

        With malformed HTML, fields of several forms can end up in this
        form; when their names collide, later ones would shadow earlier ones
        on the server side. Returns the removed fields.
        """
        seen: set[str] = set()
        kept: list[Field] = []
        removed: list[Field] = []
        for field in self.fields:
            if field.name in seen:
                removed.append(field)
            else:
                seen.add(field.name)
                kept.append(field)
        self.fields[:] = kept
        if removed:
            log.debug("Removed duplicate fields", form=self.name, count=len(removed))
        return removed

    # serialization

    def build_query(self) -> list[Pair]:
        return build_query(self)

    def build_payload(self, boundary: str | None = None) -> Payload:
        """Encode the form's query and files according to its enctype."""
        return encode_payload(
            self.build_query(), self.file_uploads, self.enctype, boundary=boundary
        )

    def describe(self) -> str:
        lines = [f"Form: [{self.name!r} -> {self.action}]"]
        for title, controls in (
            ("radiobuttons", self.radiobuttons),
            ("checkboxes", self.checkboxes),
            ("fields", self.fields),
            ("buttons", self.buttons),
            ("file_uploads", self.file_uploads),
        ):
            lines.append(f"[{title}]")
            lines.extend(f"  {control}" for control in controls)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<Form {self.method} {self.action!r} name={self.name!r}>"
