# src/semantics/groups.py
"""
Tagged group decoding.

The export's top-level array holds envelopes of the form:

    {"NativeClass": "Class'/Script/FactoryGame.FGRecipe'", "Classes": [ {...}, ... ]}

decode_group() looks the tag up in KNOWN_GROUPS and decodes every element of
"Classes" with the matching RecordSchema. Any tag that is not in the table
yields UnrecognizedGroup: the export carries hundreds of record kinds and we
only want a couple of them.

Envelope policy:
  - envelope must be an object with a string NativeClass and a Classes field
  - for known tags, Classes must be an array
  - for unknown tags, Classes may hold any JSON value and is not inspected
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from .errors import IngestError, MalformedGroupError, json_type_name
from .records import ITEM_DESCRIPTOR_SCHEMA, RECIPE_SCHEMA, RecordSchema
from .schema import ItemDescriptorGroup, RecipeGroup, TaggedGroup, UnrecognizedGroup

logger = logging.getLogger(__name__)


DISCRIMINATOR_FIELD = "NativeClass"
CONTENT_FIELD = "Classes"

ITEM_DESCRIPTOR_TAG = "Class'/Script/FactoryGame.FGItemDescriptor'"
RECIPE_TAG = "Class'/Script/FactoryGame.FGRecipe'"


@dataclass(frozen=True)
class GroupKind:
    """Binds a schema to the group variant that wraps its records."""
    schema: RecordSchema
    build: Callable[[Tuple[Any, ...]], TaggedGroup]


KNOWN_GROUPS: Dict[str, GroupKind] = {
    ITEM_DESCRIPTOR_TAG: GroupKind(
        schema=ITEM_DESCRIPTOR_SCHEMA,
        build=lambda records: ItemDescriptorGroup(item_descriptors=records),
    ),
    RECIPE_TAG: GroupKind(
        schema=RECIPE_SCHEMA,
        build=lambda records: RecipeGroup(recipes=records),
    ),
}


def decode_group(envelope: Any) -> TaggedGroup:
    """
    Decode one envelope into a TaggedGroup.

    Raises MalformedGroupError for a bad envelope, or the first record
    error (annotated with its element index) for a known tag.
    """
    if not isinstance(envelope, dict):
        raise MalformedGroupError(
            f"expected envelope to be a JSON object, got {json_type_name(envelope)}",
            value=envelope,
        )

    if DISCRIMINATOR_FIELD not in envelope:
        raise MalformedGroupError(
            f"envelope is missing discriminator field {DISCRIMINATOR_FIELD!r}",
            field=DISCRIMINATOR_FIELD,
        )
    tag = envelope[DISCRIMINATOR_FIELD]
    if not isinstance(tag, str):
        raise MalformedGroupError(
            f"expected {DISCRIMINATOR_FIELD!r} to be a string, got {json_type_name(tag)}",
            field=DISCRIMINATOR_FIELD,
            value=tag,
        )

    if CONTENT_FIELD not in envelope:
        raise MalformedGroupError(
            f"envelope {tag!r} is missing content field {CONTENT_FIELD!r}",
            field=CONTENT_FIELD,
        )
    content = envelope[CONTENT_FIELD]

    kind = KNOWN_GROUPS.get(tag)
    if kind is None:
        logger.debug("Skipping unrecognized group %s", tag)
        return UnrecognizedGroup()

    if not isinstance(content, list):
        raise MalformedGroupError(
            f"expected {CONTENT_FIELD!r} of {tag!r} to be an array, "
            f"got {json_type_name(content)}",
            record_kind=kind.schema.kind,
            field=CONTENT_FIELD,
            value=content,
        )

    records = []
    for index, element in enumerate(content):
        try:
            records.append(kind.schema.decode(element))
        except IngestError as exc:
            exc.locate(element_index=index, content_field=CONTENT_FIELD)
            raise

    return kind.build(tuple(records))


__all__ = [
    "DISCRIMINATOR_FIELD",
    "CONTENT_FIELD",
    "ITEM_DESCRIPTOR_TAG",
    "RECIPE_TAG",
    "GroupKind",
    "KNOWN_GROUPS",
    "decode_group",
]
