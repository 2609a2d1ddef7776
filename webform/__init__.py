from webform.exc import ConflictError, WebformException
from webform.helpers.forms import build_request, extract_form, find_forms
from webform.logic.form import Form
from webform.logic.payload import Payload

__all__ = [
    "ConflictError",
    "Form",
    "Payload",
    "WebformException",
    "build_request",
    "extract_form",
    "find_forms",
]
