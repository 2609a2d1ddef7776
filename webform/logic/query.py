"""Reduce a form's state to the ordered pairs it submits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from webform.exc import ConflictError
from webform.model.fields import Pair, RadioButton

if TYPE_CHECKING:
    from webform.logic.form import Form


def radio_groups(radiobuttons: list[RadioButton]) -> dict[str, list[RadioButton]]:
    """Group radio buttons by name, in order of first appearance."""
    groups: dict[str, list[RadioButton]] = {}
    for radio in radiobuttons:
        groups.setdefault(radio.name, []).append(radio)
    return groups


def build_query(form: Form) -> list[Pair]:
    """Build the ordered (name, value) pairs a form submits.

    Fields come first, then checked checkboxes, then one pair per radio
    group, then the clicked buttons in click order. Servers may depend on
    this ordering, so it is kept stable. Duplicate names are not merged.

    Args:
        form: The form to serialize.

    Returns:
        List of (name, value) tuples.

    Raises:
        ConflictError: If a radio group has more than one checked button.

    Example:
        >>> build_query(form)
        [('user', 'alice'), ('remember', 'on'), ('color', 'red')]
    """
    query: list[Pair] = []
    for field in form.fields:
        query.extend(field.query_pairs())
    for checkbox in form.checkboxes:
        query.extend(checkbox.query_pairs())
    for name, group in radio_groups(form.radiobuttons).items():
        checked = [radio for radio in group if radio.checked]
        if len(checked) > 1:
            raise ConflictError(name)
        if checked:
            query.extend(checked[0].query_pairs())
    for button in form.clicked_buttons:
        query.extend(button.query_pairs())
    return query
