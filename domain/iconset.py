"""Build Iconify icon set documents from staged icon records."""

from collections.abc import Sequence

from domain.schemas import (
    IconAlias,
    IconGeometry,
    IconRecord,
    IconSetAuthor,
    IconSetInfo,
    IconSetLicense,
    Number,
    StyleIconSet,
)


def style_prefix(base_prefix: str, style: str) -> str:
    return f"{base_prefix}-{style}"


def build_aliases(records: Sequence[IconRecord]) -> dict[str, IconAlias]:
    """
    Map metadata alias names to their parent icon.

    Aliases that collide with a real icon name in the same set are dropped,
    and the first parent (by name order) wins when two icons share an alias.
    """
    names = {r.name for r in records}
    aliases: dict[str, IconAlias] = {}
    for record in records:
        for alias in record.aliases:
            if alias in names or alias in aliases:
                continue
            aliases[alias] = IconAlias(parent=record.name)
    return aliases


def build_style_icon_set(
    records: Sequence[IconRecord],
    *,
    prefix: str,
    name: str,
    version: str,
    author_name: str,
    license_title: str,
    license_spdx: str,
    width: Number,
    height: Number,
    include_aliases: bool = False,
) -> StyleIconSet:
    """
    Assemble one style's records into a StyleIconSet.

    Args:
        records: Records of a single style, already ordered by name
        prefix: Full Iconify prefix for the set (e.g. "fa-pro-solid")
        name: Human-readable set name for the info block
        include_aliases: Emit an ``aliases`` block from metadata alias names

    Returns:
        Frozen StyleIconSet with info.total == len(records)
    """
    icons = {
        r.name: IconGeometry(body=r.body, width=r.width, height=r.height)
        for r in records
    }

    return StyleIconSet(
        prefix=prefix,
        icons=icons,
        aliases=(build_aliases(records) or None) if include_aliases else None,
        width=width,
        height=height,
        info=IconSetInfo(
            name=name,
            total=len(icons),
            version=version,
            author=IconSetAuthor(name=author_name),
            license=IconSetLicense(title=license_title, spdx=license_spdx),
        ),
    )
