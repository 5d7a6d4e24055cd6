# ItemDescriptor, Recipe and TaggedGroup variants
# src/semantics/schema.py

from dataclasses import dataclass, field
from typing import Tuple


# ---------------------------------------------------------------------------
# Record kinds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ItemDescriptor:
    """
    One entry of an FGItemDescriptor group.

    - class_name: stable engine identifier ("Desc_CircuitBoard_C")
    - display_name: human-readable label ("Circuit Board")
    """
    class_name: str
    display_name: str


@dataclass(frozen=True)
class Recipe:
    """
    One entry of an FGRecipe group.

    - class_name / display_name: same contract as ItemDescriptor
    - ingredients_raw: mIngredients exactly as exported (not parsed)
    - product_raw: mProduct exactly as exported (not parsed)
    - manufacturing_duration: seconds per craft, decoded from a quoted float;
      zero and negative values are passed through as-is
    """
    class_name: str
    display_name: str
    ingredients_raw: str
    product_raw: str
    manufacturing_duration: float


# ---------------------------------------------------------------------------
# Tagged groups
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaggedGroup:
    """
    Base of the closed set of decoded envelope variants.

    Exactly one subclass is produced per envelope:
      ItemDescriptorGroup | RecipeGroup | UnrecognizedGroup
    """


@dataclass(frozen=True)
class ItemDescriptorGroup(TaggedGroup):
    item_descriptors: Tuple[ItemDescriptor, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RecipeGroup(TaggedGroup):
    recipes: Tuple[Recipe, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UnrecognizedGroup(TaggedGroup):
    """Envelope whose tag is not a known record kind; its content is dropped."""
