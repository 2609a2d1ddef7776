"""Collect form controls from a document subtree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from anystore.logging import get_logger
from normality import collapse_spaces

from webform.logic.node import FormNode, as_node
from webform.model.fields import (
    Button,
    CheckBox,
    Field,
    FileUpload,
    ImageButton,
    RadioButton,
    SelectList,
)

log = get_logger(__name__)

TEXT_TYPES = ("text", "password", "hidden", "int")


@dataclass
class ParsedControls:
    """Controls found in a subtree, each list in document order."""

    fields: list[Field] = field(default_factory=list)
    buttons: list[Button] = field(default_factory=list)
    file_uploads: list[FileUpload] = field(default_factory=list)
    radiobuttons: list[RadioButton] = field(default_factory=list)
    checkboxes: list[CheckBox] = field(default_factory=list)


def _option_value(option: FormNode) -> str:
    value = option.get("value")
    if value is None:
        return collapse_spaces(option.text_content()) or ""
    return value


def parse_select(node: FormNode) -> SelectList:
    """Build a select list, resolving its current value from the options.

    The first option marked ``selected`` wins. Without one, a single-choice
    select falls back to its first option, the way browsers submit it; a
    ``multiple`` select submits nothing.
    """
    multiple = node.has("multiple")
    options: list[str] = []
    value: str | None = None
    for option in node.iter_options():
        option_value = _option_value(option)
        options.append(option_value)
        if value is None and option.has("selected"):
            value = option_value
    if value is None and options and not multiple:
        value = options[0]
    return SelectList(
        name=node.get("name") or "",
        value=value,
        options=options,
        multiple=multiple,
    )


def _parse_input(node: FormNode, controls: ParsedControls) -> None:
    name = node.get("name") or ""
    value = node.get("value")
    input_type = (node.get("type") or "text").lower()
    if input_type in TEXT_TYPES:
        controls.fields.append(Field(name=name, value=value or ""))
    elif input_type == "radio":
        controls.radiobuttons.append(
            RadioButton(name=name, value=value, checked=node.has("checked"))
        )
    elif input_type == "checkbox":
        controls.checkboxes.append(
            CheckBox(name=name, value=value, checked=node.has("checked"))
        )
    elif input_type == "file":
        controls.file_uploads.append(FileUpload(name=name, file_name=value or ""))
    elif input_type == "submit":
        controls.buttons.append(Button(name=name, value=value))
    elif input_type == "image":
        controls.buttons.append(ImageButton(name=name, value=value))
    else:
        log.debug("Ignoring input", name=name, type=input_type)


def parse_controls(elements_node: Any) -> ParsedControls:
    """Walk all descendants of ``elements_node`` and collect its controls.

    Malformed or missing attributes degrade to defaults; this never raises
    for markup problems and never modifies the tree.
    """
    controls = ParsedControls()
    for node in as_node(elements_node).iter_descendants():
        tag = node.tag
        if tag == "input":
            _parse_input(node, controls)
        elif tag == "textarea":
            controls.fields.append(
                Field(name=node.get("name") or "", value=node.text_content())
            )
        elif tag == "select":
            controls.fields.append(parse_select(node))
    log.debug(
        "Parsed form controls",
        fields=len(controls.fields),
        buttons=len(controls.buttons),
        file_uploads=len(controls.file_uploads),
        radiobuttons=len(controls.radiobuttons),
        checkboxes=len(controls.checkboxes),
    )
    return controls
