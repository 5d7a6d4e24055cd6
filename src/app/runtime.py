# src/app/runtime.py
"""
Summaries of a decoded export for humans and scripts.

- build_summary(db)        -> plain dict of counts
- export_to_dict(db)       -> JSON-ready dict of every decoded record
- render_summary(db, con)  -> rich table on a Console
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

from semantics.loader import ExportDB


def build_summary(db: ExportDB) -> Dict[str, int]:
    """Counts shown by the CLI summary table."""
    return {
        "groups": db.group_count,
        "ignored_groups": db.ignored_group_count,
        "item_descriptors": len(db.item_descriptors),
        "recipes": len(db.recipes),
    }


def export_to_dict(db: ExportDB) -> Dict[str, Any]:
    """Every decoded record, in export order, as plain JSON types."""
    return {
        "summary": build_summary(db),
        "item_descriptors": [asdict(i) for i in db.item_descriptors],
        "recipes": [asdict(r) for r in db.recipes],
    }


def render_summary(db: ExportDB, console: Console, title: str = "Docs export") -> None:
    """
    Print a two-part summary: group counts, then one row per recipe.
    """
    summary = build_summary(db)

    counts = Table(title=title, show_header=True, header_style="bold magenta")
    counts.add_column("Section", style="bold")
    counts.add_column("Count", justify="right")
    counts.add_row("Groups", str(summary["groups"]))
    counts.add_row("Ignored groups", str(summary["ignored_groups"]))
    counts.add_row("Item descriptors", str(summary["item_descriptors"]))
    counts.add_row("Recipes", str(summary["recipes"]))
    console.print(counts)

    if not db.recipes:
        console.print("[bold yellow]No recipes decoded.[/bold yellow]")
        return

    recipes = Table(show_header=True, header_style="bold green")
    recipes.add_column("Recipe", style="bold")
    recipes.add_column("Display name")
    recipes.add_column("Duration (s)", justify="right")
    for recipe in db.recipes:
        recipes.add_row(
            recipe.class_name,
            recipe.display_name,
            f"{recipe.manufacturing_duration:g}",
        )
    console.print(recipes)
