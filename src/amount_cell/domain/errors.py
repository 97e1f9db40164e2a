"""Domain exceptions and rejection codes used across the formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a caller-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


class RejectionReason(StrEnum):
    """Reason codes attached to raw amounts that cannot be parsed."""

    EMPTY = "empty"
    MALFORMED = "malformed"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidConfigurationError(DomainError):
    """Raised when the field is configured with a value it cannot honour."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_CONFIGURATION",
            message=message
            or compose_error_message(
                cause="Field configuration violates amount rules.",
                action="Provide a non-empty currency symbol and a non-negative amount.",
            ),
            details=details or {},
        )
