"""Edit script request and report schemas."""

from amount_cell.application.schemas.edit_script import (
    EditScript,
    FocusEvent,
    ReplayReport,
    ReplayStep,
    SelectEvent,
    TextEvent,
)

__all__ = [
    "EditScript",
    "FocusEvent",
    "ReplayReport",
    "ReplayStep",
    "SelectEvent",
    "TextEvent",
]
