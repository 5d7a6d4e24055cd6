# src/semantics/records.py
"""
Field-mapping schemas for the record kinds we understand.

A RecordSchema is a declarative list of FieldSpecs: which JSON field to read,
which dataclass attribute it fills, and either the JSON type it must have or
a coercion function to run on it. decode() applies the specs to one JSON
object and builds the record.

Lookup is exact and case-sensitive ("ClassName", "mDisplayName", ...).
Fields the export carries but we don't list are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from .coercion import parse_stringed_float
from .errors import IngestError, MissingFieldError, TypeMismatchError
from .schema import ItemDescriptor, Recipe


@dataclass(frozen=True)
class FieldSpec:
    """
    Mapping of one JSON field onto one record attribute.

    - json_name: field name in the export object
    - attr: keyword argument for the record constructor
    - expected: JSON type name the raw value must have ("string")
    - coerce: optional function applied after the type check
    """
    json_name: str
    attr: str
    expected: str = "string"
    coerce: Optional[Callable[[Any], Any]] = None


_TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
}


@dataclass(frozen=True)
class RecordSchema:
    """Named set of FieldSpecs plus the dataclass they construct."""
    kind: str
    record_type: Type[Any]
    fields: Tuple[FieldSpec, ...]

    def decode(self, obj: Any) -> Any:
        """
        Build one record from a JSON object.

        Raises:
          TypeMismatchError  - obj is not an object, or a field has the wrong type
          MissingFieldError  - a required field is absent
          NumericStringError - a coerced field does not parse
        """
        if not isinstance(obj, dict):
            raise TypeMismatchError(None, "object", self.kind, obj)

        kwargs: Dict[str, Any] = {}
        for spec in self.fields:
            if spec.json_name not in obj:
                raise MissingFieldError(spec.json_name, self.kind)

            raw = obj[spec.json_name]
            if not _TYPE_CHECKS[spec.expected](raw):
                raise TypeMismatchError(spec.json_name, spec.expected, self.kind, raw)

            if spec.coerce is None:
                kwargs[spec.attr] = raw
                continue

            try:
                kwargs[spec.attr] = spec.coerce(raw)
            except IngestError as exc:
                exc.locate(field=spec.json_name, record_kind=self.kind)
                raise

        return self.record_type(**kwargs)


# ---------------------------------------------------------------------------
# Known schemas
# ---------------------------------------------------------------------------

_IDENTITY_FIELDS = (
    FieldSpec("ClassName", "class_name"),
    FieldSpec("mDisplayName", "display_name"),
)

ITEM_DESCRIPTOR_SCHEMA = RecordSchema(
    kind="ItemDescriptor",
    record_type=ItemDescriptor,
    fields=_IDENTITY_FIELDS,
)

RECIPE_SCHEMA = RecordSchema(
    kind="Recipe",
    record_type=Recipe,
    fields=_IDENTITY_FIELDS + (
        FieldSpec("mIngredients", "ingredients_raw"),
        FieldSpec("mProduct", "product_raw"),
        FieldSpec(
            "mManufactoringDuration",
            "manufacturing_duration",
            coerce=parse_stringed_float,
        ),
    ),
)


def decode_item_descriptor(obj: Any) -> ItemDescriptor:
    """Decode one FGItemDescriptor entry."""
    return ITEM_DESCRIPTOR_SCHEMA.decode(obj)


def decode_recipe(obj: Any) -> Recipe:
    """Decode one FGRecipe entry."""
    return RECIPE_SCHEMA.decode(obj)


__all__ = [
    "FieldSpec",
    "RecordSchema",
    "ITEM_DESCRIPTOR_SCHEMA",
    "RECIPE_SCHEMA",
    "decode_item_descriptor",
    "decode_recipe",
]
