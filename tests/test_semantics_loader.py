# tests/test_semantics_loader.py
"""
Tests for export ingestion: envelope sequences, raw text/bytes, files on
disk, and the ExportDB index built on top of them.
"""

import json
from pathlib import Path

import pytest

from semantics.errors import (
    IngestError,
    MalformedDocumentError,
    MalformedGroupError,
    MissingFieldError,
)
from semantics.groups import ITEM_DESCRIPTOR_TAG, RECIPE_TAG
from semantics.loader import (
    ExportDB,
    decode_export_bytes,
    ingest_bytes,
    ingest_groups,
    ingest_text,
    load_export,
)
from semantics.schema import ItemDescriptorGroup, RecipeGroup, UnrecognizedGroup

FIXTURES = Path(__file__).resolve().parent / "fixtures"

STEEL_BEAM_EXPORT = (
    '[{"NativeClass":"Class\'/Script/FactoryGame.FGRecipe\'","Classes":'
    '[{"ClassName":"Recipe_SteelBeam_C","mDisplayName":"Steel Beam",'
    '"mIngredients":"...","mProduct":"...","mManufactoringDuration":"4"}]}]'
)


def _recipe(class_name: str, duration: str = "4") -> dict:
    return {
        "ClassName": class_name,
        "mDisplayName": class_name,
        "mIngredients": "",
        "mProduct": "",
        "mManufactoringDuration": duration,
    }


# ---------------------------------------------------------------------------
# ingest_groups
# ---------------------------------------------------------------------------

def test_ingest_groups_empty_input():
    assert ingest_groups([]) == []


def test_unknown_tag_does_not_disturb_following_groups():
    values = [
        {"NativeClass": "Class'/Script/FactoryGame.FGSchematic'", "Classes": [[{"x": 1}], 2]},
        {"NativeClass": RECIPE_TAG, "Classes": [_recipe("Recipe_Wire_C")]},
    ]
    groups = ingest_groups(values)

    assert len(groups) == 2
    assert isinstance(groups[0], UnrecognizedGroup)
    assert isinstance(groups[1], RecipeGroup)
    assert groups[1].recipes[0].class_name == "Recipe_Wire_C"


def test_fail_fast_reports_first_bad_envelope():
    values = [
        {"NativeClass": RECIPE_TAG, "Classes": [_recipe("Recipe_A_C")]},
        {"NativeClass": ITEM_DESCRIPTOR_TAG, "Classes": [{"ClassName": "Desc_B_C"}]},
        {"NativeClass": RECIPE_TAG},  # also broken, must not be the one reported
    ]
    with pytest.raises(MissingFieldError) as excinfo:
        ingest_groups(values)

    err = excinfo.value
    assert err.group_index == 1
    assert err.element_index == 0
    assert err.field == "mDisplayName"
    assert str(err).startswith("groups[1].Classes[0].mDisplayName (ItemDescriptor):")


def test_malformed_envelope_gets_group_index():
    with pytest.raises(MalformedGroupError) as excinfo:
        ingest_groups([{"NativeClass": RECIPE_TAG, "Classes": []}, {"Classes": []}])

    assert excinfo.value.group_index == 1
    assert excinfo.value.path == "groups[1].NativeClass"


# ---------------------------------------------------------------------------
# Text / bytes
# ---------------------------------------------------------------------------

def test_end_to_end_steel_beam():
    groups = ingest_text(STEEL_BEAM_EXPORT)

    assert len(groups) == 1
    group = groups[0]
    assert isinstance(group, RecipeGroup)
    assert len(group.recipes) == 1
    recipe = group.recipes[0]
    assert recipe.class_name == "Recipe_SteelBeam_C"
    assert recipe.display_name == "Steel Beam"
    assert recipe.manufacturing_duration == 4.0
    assert recipe.ingredients_raw == "..."
    assert recipe.product_raw == "..."


def test_can_parse_class_groups_fixture():
    groups = ingest_text((FIXTURES / "class_groups.json").read_text(encoding="utf-8"))

    assert len(groups) == 3
    assert isinstance(groups[0], UnrecognizedGroup)
    assert isinstance(groups[1], ItemDescriptorGroup)
    assert isinstance(groups[2], RecipeGroup)


def test_ingest_text_invalid_json():
    with pytest.raises(MalformedDocumentError) as excinfo:
        ingest_text('[{"NativeClass": "x", "Classes": [}]')

    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
    assert "line 1" in str(excinfo.value)


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_ingest_text_rejects_non_json_constants_under_unknown_tag(constant):
    text = (
        '[{"NativeClass": "Class\'/Script/FactoryGame.FGSchematic\'", '
        f'"Classes": [{{"mCost": {constant}}}]}}]'
    )
    with pytest.raises(MalformedDocumentError) as excinfo:
        ingest_text(text)

    assert constant in str(excinfo.value)


def test_ingest_text_deep_nesting_is_malformed():
    depth = 100000
    text = '[{"NativeClass": "X", "Classes": ' + "[" * depth + "]" * depth + "}]"

    with pytest.raises(MalformedDocumentError) as excinfo:
        ingest_text(text)

    assert isinstance(excinfo.value.__cause__, RecursionError)


@pytest.mark.parametrize("text", ['{"NativeClass": "x", "Classes": []}', '"x"', "null"])
def test_ingest_text_requires_top_level_array(text):
    with pytest.raises(MalformedDocumentError):
        ingest_text(text)


@pytest.mark.parametrize("encoding", ["utf-8", "utf-8-sig", "utf-16", "utf-16-be"])
def test_decode_export_bytes_sniffs_bom(encoding):
    raw = STEEL_BEAM_EXPORT.encode(encoding)
    if encoding == "utf-16-be":
        raw = b"\xfe\xff" + raw

    assert decode_export_bytes(raw) == STEEL_BEAM_EXPORT


def test_decode_export_bytes_explicit_encoding():
    raw = "[]".encode("utf-16-le")
    assert decode_export_bytes(raw, encoding="utf-16-le") == "[]"


def test_decode_export_bytes_rejects_garbage():
    with pytest.raises(MalformedDocumentError):
        decode_export_bytes(b"\xff\xfe\x00")


def test_ingest_bytes_utf16_export():
    groups = ingest_bytes(STEEL_BEAM_EXPORT.encode("utf-16"))
    assert groups[0].recipes[0].class_name == "Recipe_SteelBeam_C"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def test_load_export_reads_utf16_file(tmp_path: Path):
    path = tmp_path / "Docs.json"
    path.write_bytes(
        (FIXTURES / "class_groups.json").read_text(encoding="utf-8").encode("utf-16")
    )

    groups = load_export(path)
    assert [type(g) for g in groups] == [UnrecognizedGroup, ItemDescriptorGroup, RecipeGroup]


def test_load_export_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_export(tmp_path / "missing.json")


def test_load_export_directory_is_not_a_file(tmp_path: Path):
    directory = tmp_path / "Docs.json"
    directory.mkdir()

    with pytest.raises(FileNotFoundError):
        load_export(directory)


# ---------------------------------------------------------------------------
# ExportDB
# ---------------------------------------------------------------------------

def test_export_db_indexes_fixture():
    db = ExportDB.from_path(FIXTURES / "class_groups.json")

    assert db.group_count == 3
    assert db.ignored_group_count == 1
    assert [i.class_name for i in db.item_descriptors] == ["Desc_CircuitBoard_C", "Desc_SteelBeam_C"]
    assert [r.class_name for r in db.recipes] == ["Recipe_SteelBeam_C", "Recipe_CircuitBoard_C"]

    circuit = db.get_recipe("Recipe_CircuitBoard_C")
    assert circuit is not None
    assert circuit.manufacturing_duration == 8.0
    assert db.get_item_descriptor("Desc_SteelBeam_C").display_name == "Steel Beam"
    assert db.get_recipe("Recipe_Missing_C") is None
    assert db.get_item_descriptor("Recipe_SteelBeam_C") is None


def test_export_db_later_duplicate_wins():
    groups = ingest_groups(
        [
            {"NativeClass": RECIPE_TAG, "Classes": [_recipe("Recipe_X_C", "1")]},
            {"NativeClass": RECIPE_TAG, "Classes": [_recipe("Recipe_X_C", "2")]},
        ]
    )
    db = ExportDB.from_groups(groups)

    assert len(db.recipes) == 2
    assert db.get_recipe("Recipe_X_C").manufacturing_duration == 2.0


def test_export_db_propagates_ingest_errors(tmp_path: Path):
    path = tmp_path / "Docs.json"
    path.write_text('[{"Classes": []}]', encoding="utf-8")

    with pytest.raises(IngestError):
        ExportDB.from_path(path)
