# src/semantics/loader.py
"""
Docs export loader.

Responsibility:
  - Turn a parsed export (list of envelopes) into TaggedGroups, in order,
    failing on the first bad envelope (ingest_groups)
  - Front doors for raw text, raw bytes and files on disk
  - ExportDB: a small in-memory index over the decoded groups for
    item-descriptor / recipe lookup by class name

The engine writes Docs.json as UTF-16 with a BOM, so byte decoding sniffs
the BOM before falling back to UTF-8.
"""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import IngestError, MalformedDocumentError, json_type_name
from .groups import decode_group
from .schema import (
    ItemDescriptor,
    ItemDescriptorGroup,
    Recipe,
    RecipeGroup,
    TaggedGroup,
    UnrecognizedGroup,
)

logger = logging.getLogger(__name__)


# Checked in order; UTF-8 BOM is handled by the utf-8-sig codec.
_BOMS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


# ---------------------------------------------------------------------------
# Ingestion entry point
# ---------------------------------------------------------------------------

def ingest_groups(values: Sequence[Any]) -> List[TaggedGroup]:
    """
    Decode every envelope in order.

    The first failure aborts the whole call, annotated with the envelope
    index; nothing partial is returned. Empty input yields [].
    """
    groups: List[TaggedGroup] = []
    for index, envelope in enumerate(values):
        try:
            groups.append(decode_group(envelope))
        except IngestError as exc:
            exc.locate(group_index=index)
            raise

    ignored = sum(1 for g in groups if isinstance(g, UnrecognizedGroup))
    logger.debug(
        "Decoded %d groups (%d unrecognized)", len(groups), ignored
    )
    return groups


# ---------------------------------------------------------------------------
# Text / bytes / file front doors
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    """json.loads hook: NaN / Infinity / -Infinity are not JSON."""
    raise MalformedDocumentError(f"invalid JSON constant {name!r}")


def ingest_text(text: str) -> List[TaggedGroup]:
    """
    Parse export JSON text and decode it.

    Raises MalformedDocumentError if the text is not JSON (including the
    NaN/Infinity extensions and nesting too deep to parse) or its top level
    is not an array.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc
    except RecursionError as exc:
        raise MalformedDocumentError("JSON nesting too deep to decode") from exc

    if not isinstance(document, list):
        raise MalformedDocumentError(
            f"expected export top level to be a JSON array, got {json_type_name(document)}"
        )
    return ingest_groups(document)


def decode_export_bytes(raw: bytes, encoding: str = "auto") -> str:
    """
    Decode raw export bytes into text.

    encoding="auto" picks the codec from a UTF-8/UTF-16 BOM, else UTF-8.
    Any other value is used as a codec name directly.
    """
    codec = encoding
    if encoding == "auto":
        codec = "utf-8"
        for bom, name in _BOMS:
            if raw.startswith(bom):
                codec = name
                break

    try:
        return raw.decode(codec)
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(
            f"export is not valid {codec} text: {exc.reason} at byte {exc.start}"
        ) from exc


def ingest_bytes(raw: bytes, encoding: str = "auto") -> List[TaggedGroup]:
    """Decode raw bytes, then ingest the resulting text."""
    return ingest_text(decode_export_bytes(raw, encoding=encoding))


def load_export(path: Path, encoding: str = "auto") -> List[TaggedGroup]:
    """
    Read and ingest an export file.

    Raises FileNotFoundError if the path is not an existing regular file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Missing export file: {path}")
    groups = ingest_bytes(path.read_bytes(), encoding=encoding)
    logger.info("Loaded %d groups from %s", len(groups), path)
    return groups


# ---------------------------------------------------------------------------
# ExportDB
# ---------------------------------------------------------------------------

class ExportDB:
    """
    In-memory index over a decoded Docs export.

    - item_descriptors / recipes: all records of each kind, export order
    - get_item_descriptor / get_recipe: lookup by class name; when a class
      name appears twice the later record wins
    - ignored_group_count: envelopes that were skipped as unrecognized
    """

    def __init__(self, groups: Iterable[TaggedGroup]) -> None:
        self._groups: Tuple[TaggedGroup, ...] = tuple(groups)

        items: List[ItemDescriptor] = []
        recipes: List[Recipe] = []
        for group in self._groups:
            if isinstance(group, ItemDescriptorGroup):
                items.extend(group.item_descriptors)
            elif isinstance(group, RecipeGroup):
                recipes.extend(group.recipes)

        self._item_descriptors: Tuple[ItemDescriptor, ...] = tuple(items)
        self._recipes: Tuple[Recipe, ...] = tuple(recipes)
        self._item_index: Dict[str, ItemDescriptor] = {i.class_name: i for i in items}
        self._recipe_index: Dict[str, Recipe] = {r.class_name: r for r in recipes}

    @classmethod
    def from_groups(cls, groups: Iterable[TaggedGroup]) -> "ExportDB":
        return cls(groups)

    @classmethod
    def from_path(cls, path: Path, encoding: str = "auto") -> "ExportDB":
        return cls(load_export(path, encoding=encoding))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def groups(self) -> Tuple[TaggedGroup, ...]:
        return self._groups

    @property
    def group_count(self) -> int:
        return len(self._groups)

    @property
    def ignored_group_count(self) -> int:
        return sum(1 for g in self._groups if isinstance(g, UnrecognizedGroup))

    @property
    def item_descriptors(self) -> Tuple[ItemDescriptor, ...]:
        return self._item_descriptors

    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        return self._recipes

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_item_descriptor(self, class_name: str) -> Optional[ItemDescriptor]:
        return self._item_index.get(class_name)

    def get_recipe(self, class_name: str) -> Optional[Recipe]:
        return self._recipe_index.get(class_name)


__all__ = [
    "ingest_groups",
    "ingest_text",
    "decode_export_bytes",
    "ingest_bytes",
    "load_export",
    "ExportDB",
]
