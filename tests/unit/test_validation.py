from pathlib import Path

from application.validation import validate_kit
from infrastructure.config import KitLayoutConfig
from infrastructure.io import FileSystemKitSource


def _layout_dirs(root: Path, *names: str) -> None:
    for name in names:
        (root / name).mkdir(parents=True, exist_ok=True)


def test_valid_kit(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "metadata", "svgs/solid", "otfs")
    (tmp_path / "metadata" / "icons.json").write_text("{}", encoding="utf-8")

    result = validate_kit(FileSystemKitSource(tmp_path), KitLayoutConfig())

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_missing_directories_are_aggregated(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "metadata")

    result = validate_kit(FileSystemKitSource(tmp_path), KitLayoutConfig())

    assert not result.is_valid
    assert len(result.errors) == 2
    assert all(e.startswith("Missing required directory") for e in result.errors)


def test_file_in_place_of_directory(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "metadata", "svgs")
    (tmp_path / "otfs").write_text("not a dir", encoding="utf-8")

    result = validate_kit(FileSystemKitSource(tmp_path), KitLayoutConfig())

    assert not result.is_valid
    assert result.errors == [f"{tmp_path / 'otfs'} is not a directory"]


def test_metadata_directory_without_json_is_an_error(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "metadata", "svgs/solid", "otfs")
    (tmp_path / "metadata" / "README.txt").write_text("", encoding="utf-8")

    result = validate_kit(FileSystemKitSource(tmp_path), KitLayoutConfig())

    assert not result.is_valid
    assert result.errors == ["No metadata JSON files found in metadata directory"]


def test_no_style_directories_is_only_a_warning(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "metadata", "svgs", "otfs")
    (tmp_path / "metadata" / "icons.json").write_text("{}", encoding="utf-8")

    result = validate_kit(FileSystemKitSource(tmp_path), KitLayoutConfig())

    assert result.is_valid
    assert result.warnings == ["No SVG subdirectories found - kit may be incomplete"]


def test_custom_layout_names(tmp_path: Path) -> None:
    _layout_dirs(tmp_path, "meta", "svg-files/solid", "fonts")
    (tmp_path / "meta" / "icons.json").write_text("{}", encoding="utf-8")

    result = validate_kit(
        FileSystemKitSource(tmp_path),
        KitLayoutConfig(metadata="meta", svgs="svg-files", fonts="fonts"),
    )

    assert result.is_valid
