# src/semantics/errors.py
"""
Error taxonomy for export ingestion.

Every failure raised while decoding a Docs export derives from IngestError,
so callers can catch one type at the boundary and still branch on the
concrete kind:

  - MalformedDocumentError  : text/bytes are not a JSON array of envelopes
  - MalformedGroupError     : envelope missing NativeClass/Classes or wrong shape
  - MissingFieldError       : required record field absent
  - TypeMismatchError       : record field present with the wrong JSON type
  - NumericStringError      : quoted float that does not parse

Errors pick up location as they propagate upward (element index, then
envelope index), so the message points at the exact spot in the export.
"""

from __future__ import annotations

from typing import Any, Optional


class IngestError(Exception):
    """
    Base class for all ingestion failures.

    Attributes:
        record_kind: record kind being decoded ("ItemDescriptor", "Recipe") or None
        field:       JSON field name involved, or None
        value:       offending raw JSON value, when one exists
        group_index: position of the envelope in the export, once known
        element_index: position of the record inside "Classes", once known
    """

    def __init__(
        self,
        message: str,
        *,
        record_kind: Optional[str] = None,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.record_kind = record_kind
        self.field = field
        self.value = value
        self.group_index: Optional[int] = None
        self.element_index: Optional[int] = None
        self.content_field: Optional[str] = None

    def locate(
        self,
        *,
        group_index: Optional[int] = None,
        element_index: Optional[int] = None,
        content_field: Optional[str] = None,
        field: Optional[str] = None,
        record_kind: Optional[str] = None,
    ) -> "IngestError":
        """
        Fill in location details that are not set yet and return self.

        Inner layers know more than outer ones, so existing values are kept.
        """
        if group_index is not None and self.group_index is None:
            self.group_index = group_index
        if element_index is not None and self.element_index is None:
            self.element_index = element_index
        if content_field is not None and self.content_field is None:
            self.content_field = content_field
        if field is not None and self.field is None:
            self.field = field
        if record_kind is not None and self.record_kind is None:
            self.record_kind = record_kind
        return self

    @property
    def path(self) -> str:
        """Dotted location like groups[1].Classes[0].mDisplayName ("" if unknown)."""
        parts = []
        if self.group_index is not None:
            parts.append(f"groups[{self.group_index}]")
        if self.element_index is not None:
            parts.append(f"{self.content_field or 'Classes'}[{self.element_index}]")
        if self.field is not None:
            parts.append(self.field)
        return ".".join(parts)

    def __str__(self) -> str:
        where = self.path
        kind = f" ({self.record_kind})" if self.record_kind else ""
        if where:
            return f"{where}{kind}: {self.message}"
        return f"{self.message}{kind}" if kind else self.message


class MalformedDocumentError(IngestError):
    """Raised when the export text is not valid JSON or not a top-level array."""


class MalformedGroupError(IngestError):
    """Raised for envelopes without a string NativeClass or without Classes."""


class MissingFieldError(IngestError):
    """Raised when a required field is absent from a record object."""

    def __init__(self, field: str, record_kind: str) -> None:
        super().__init__(
            f"missing required field {field!r}",
            record_kind=record_kind,
            field=field,
        )


class TypeMismatchError(IngestError, TypeError):
    """Raised when a field holds a JSON type other than the expected one."""

    def __init__(
        self,
        field: Optional[str],
        expected: str,
        record_kind: str,
        value: Any,
    ) -> None:
        target = f"field {field!r}" if field is not None else "record"
        super().__init__(
            f"expected {target} to be a JSON {expected}, "
            f"got {json_type_name(value)} {value!r}",
            record_kind=record_kind,
            field=field,
            value=value,
        )
        self.expected = expected


class NumericStringError(IngestError, ValueError):
    """Raised when a quoted float cannot be parsed into a finite float."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"invalid value {value!r}, expected a quoted string "
            f"describing a floating point number",
            value=value,
        )


def json_type_name(value: Any) -> str:
    """Name the JSON type of an already-parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = [
    "IngestError",
    "MalformedDocumentError",
    "MalformedGroupError",
    "MissingFieldError",
    "TypeMismatchError",
    "NumericStringError",
    "json_type_name",
]
