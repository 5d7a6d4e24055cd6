# semantics package
# src/semantics/__init__.py

"""
Typed ingestion façade for the FactoryGame Docs export.

This module provides a small, stable surface for consumers:

- ingest_groups(values)  -> List[TaggedGroup]   (parsed JSON envelopes)
- ingest_text(text) / ingest_bytes(raw) / load_export(path)
- ExportDB               -> item descriptor / recipe lookup by class name
- parse_stringed_float   -> the quoted-float coercion rule
"""

from __future__ import annotations

from .coercion import parse_stringed_float
from .errors import (
    IngestError,
    MalformedDocumentError,
    MalformedGroupError,
    MissingFieldError,
    NumericStringError,
    TypeMismatchError,
)
from .groups import ITEM_DESCRIPTOR_TAG, RECIPE_TAG, decode_group
from .loader import (
    ExportDB,
    decode_export_bytes,
    ingest_bytes,
    ingest_groups,
    ingest_text,
    load_export,
)
from .records import decode_item_descriptor, decode_recipe
from .schema import (
    ItemDescriptor,
    ItemDescriptorGroup,
    Recipe,
    RecipeGroup,
    TaggedGroup,
    UnrecognizedGroup,
)


__all__ = [
    "ItemDescriptor",
    "Recipe",
    "TaggedGroup",
    "ItemDescriptorGroup",
    "RecipeGroup",
    "UnrecognizedGroup",
    "IngestError",
    "MalformedDocumentError",
    "MalformedGroupError",
    "MissingFieldError",
    "TypeMismatchError",
    "NumericStringError",
    "ITEM_DESCRIPTOR_TAG",
    "RECIPE_TAG",
    "ExportDB",
    "decode_export_bytes",
    "decode_group",
    "decode_item_descriptor",
    "decode_recipe",
    "ingest_bytes",
    "ingest_groups",
    "ingest_text",
    "load_export",
    "parse_stringed_float",
]
