import json
from pathlib import Path

import pytest

from domain.kit import parse_kit_metadata
from infrastructure.io import FileSystemKitSource, InMemoryKitSource, load_kit_metadata

HOUSE = {
    "changes": ["1", "5.0.0"],
    "label": "House",
    "unicode": "f015",
    "aliases": {"names": ["home", "home-alt"], "unicodes": {"secondary": ["10f015"]}},
    "search": {"terms": ["abode", "building", "main"]},
    "styles": ["solid", "regular"],
    "svg": {
        "solid": {
            "width": 576,
            "height": 512,
            "viewBox": [0, 0, 576, 512],
            "path": "M575.8 255.5z",
            "raw": '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 576 512"><path d="M575.8 255.5z"/></svg>',
            "last_modified": 1690000000,
        },
        "duotone": {"path": ["M0 0", None, ""]},
    },
}


def test_parse_kit_metadata_keeps_converter_fields() -> None:
    metadata = parse_kit_metadata({"house": HOUSE})

    house = metadata["house"]
    assert house.name == "house"
    assert house.unicode == "f015"
    assert house.label == "House"
    assert house.aliases == ["home", "home-alt"]
    assert house.search_terms == ["abode", "building", "main"]
    assert house.styles == ["solid", "regular"]
    assert set(house.svg) == {"solid", "duotone"}
    assert house.svg["solid"].view_box == [0, 0, 576, 512]
    assert house.svg["solid"].width == 576
    assert house.svg["duotone"].path == ["M0 0", ""]


def test_missing_optional_fields_default_to_empty() -> None:
    metadata = parse_kit_metadata({"bare": {"unicode": "e000"}})

    bare = metadata["bare"]
    assert bare.search_terms == []
    assert bare.aliases == []
    assert bare.svg == {}


def test_malformed_descriptor_is_dropped_but_entry_kept() -> None:
    metadata = parse_kit_metadata(
        {"odd": {"unicode": "e001", "svg": {"solid": {"width": "wide", "path": "M0 0"}, "regular": {"path": "M1 1"}}}}
    )

    assert set(metadata["odd"].svg) == {"regular"}


def test_viewbox_with_wrong_arity_is_ignored() -> None:
    metadata = parse_kit_metadata({"x": {"svg": {"solid": {"path": "M0 0", "viewBox": [0, 0, 10]}}}})

    assert metadata["x"].svg["solid"].view_box is None


def test_non_object_entries_are_skipped() -> None:
    metadata = parse_kit_metadata({"house": HOUSE, "junk": ["not", "an", "object"]})

    assert list(metadata) == ["house"]


def test_non_mapping_document_raises() -> None:
    with pytest.raises(ValueError):
        parse_kit_metadata(["house"])  # type: ignore[arg-type]


def test_later_metadata_documents_override_earlier_names() -> None:
    source = InMemoryKitSource(
        {
            "metadata/a-icons.json": {"a": {"unicode": "1"}, "b": {"unicode": "2"}},
            "metadata/b-icons.json": {"b": {"unicode": "3"}},
        }
    )

    merged = load_kit_metadata(source, "metadata")

    assert merged["a"].unicode == "1"
    assert merged["b"].unicode == "3"


def test_load_kit_metadata_returns_a_fresh_mapping_each_call() -> None:
    source = InMemoryKitSource({"metadata/icons.json": {"house": HOUSE}})

    first = load_kit_metadata(source, "metadata")
    first.pop("house")
    second = load_kit_metadata(source, "metadata")

    assert "house" in second


def test_load_kit_metadata_skips_unreadable_documents(tmp_path: Path) -> None:
    metadata_dir = tmp_path / "metadata"
    metadata_dir.mkdir()
    (metadata_dir / "a-icons.json").write_text(json.dumps({"house": HOUSE}), encoding="utf-8")
    (metadata_dir / "b-broken.json").write_text("{not json", encoding="utf-8")
    (metadata_dir / "notes.txt").write_text("ignored", encoding="utf-8")

    metadata = load_kit_metadata(FileSystemKitSource(tmp_path), "metadata")

    assert list(metadata) == ["house"]


def test_load_kit_metadata_rejects_non_mapping_document() -> None:
    source = InMemoryKitSource({"metadata/icons.json": "[1, 2, 3]"})

    with pytest.raises(ValueError, match="Invalid metadata document"):
        load_kit_metadata(source, "metadata")
