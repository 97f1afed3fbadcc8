"""Scaffold a FontAwesome kit directory tree (empty, or with a tiny sample icon)."""

from __future__ import annotations

import argparse
import json
import shutil
from pathlib import Path

KIT_DIRS = [
    Path("metadata"),
    Path("svgs"),
    Path("otfs"),
]

SAMPLE_STYLES = ["solid", "regular"]

SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 512 512">'
    '<path d="M0 0h512v512H0z"/></svg>'
)

SAMPLE_METADATA = {
    "square": {
        "label": "Square",
        "unicode": "f0c8",
        "aliases": {"names": ["square-full-sample"]},
        "search": {"terms": ["block", "box", "shape"]},
        "styles": SAMPLE_STYLES,
        "svg": {
            # no regular/square.svg is written: this style is built from the descriptor
            "regular": {
                "width": 448,
                "height": 512,
                "viewBox": [0, 0, 448, 512],
                "path": "M0 0h448v512H0z",
            },
        },
    },
}


# scaffold the bare directory layout
def scaffold_empty(dest_root: Path, force: bool) -> None:
    if dest_root.exists() and any(dest_root.iterdir()) and not force:
        raise SystemExit(f"Destination exists and is not empty: {dest_root} (use --force)")

    for rel in KIT_DIRS:
        (dest_root / rel).mkdir(parents=True, exist_ok=True)


# scaffold a kit with one icon: a file-backed style and a metadata-only style
def scaffold_sample(dest_root: Path, force: bool) -> None:
    if dest_root.exists() and force:
        shutil.rmtree(dest_root)
    scaffold_empty(dest_root, force)

    (dest_root / "metadata" / "icons.json").write_text(json.dumps(SAMPLE_METADATA, indent=2), encoding="utf-8")
    for style in SAMPLE_STYLES:
        (dest_root / "svgs" / style).mkdir(parents=True, exist_ok=True)
    (dest_root / "svgs" / "solid" / "square.svg").write_text(SAMPLE_SVG, encoding="utf-8")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--dest", required=True, help="Kit root to create (e.g., font-awesome-kit)")
    ap.add_argument("--sample", action="store_true", help="Write a one-icon sample kit instead of empty dirs")
    ap.add_argument("--force", action="store_true", help="Overwrite if destination exists")
    args = ap.parse_args()

    dest_root = Path(args.dest)

    if args.sample:
        scaffold_sample(dest_root, args.force)
        print(f"Scaffolded sample kit at: {dest_root}")
        return

    scaffold_empty(dest_root, args.force)
    print(f"Scaffolded empty kit tree at: {dest_root}")


if __name__ == "__main__":
    main()
