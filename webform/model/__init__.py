from webform.model.fields import (
    BaseControl,
    Button,
    CheckBox,
    Control,
    Field,
    FileUpload,
    ImageButton,
    Pair,
    RadioButton,
    SelectList,
)

__all__ = [
    "BaseControl",
    "Button",
    "CheckBox",
    "Control",
    "Field",
    "FileUpload",
    "ImageButton",
    "Pair",
    "RadioButton",
    "SelectList",
]
