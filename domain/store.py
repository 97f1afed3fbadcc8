"""In-memory staging table for reconciled icons, keyed by (name, style)."""

from collections.abc import Iterator, Sequence

from domain.schemas import IconRecord


class IconStore:
    """
    Process-scoped icon table.

    - upsert() is last-write-wins on (name, style)
    - reads return records sorted by name (and style for cross-style queries)
    - records are validated once, when the IconRecord is built; never on read
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], IconRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[IconRecord]:
        return iter(sorted(self._records.values(), key=lambda r: (r.name, r.style)))

    def upsert(self, record: IconRecord) -> None:
        self._records[record.key] = record

    def get(self, name: str, style: str) -> IconRecord | None:
        return self._records.get((name, style))

    def list_styles(self) -> list[str]:
        return sorted({style for _, style in self._records})

    def list_by_style(self, style: str) -> list[IconRecord]:
        return sorted((r for r in self._records.values() if r.style == style), key=lambda r: r.name)

    def count(self, style: str | None = None) -> int:
        if style is None:
            return len(self._records)
        return sum(1 for _, s in self._records if s == style)

    def search(self, query: str, styles: Sequence[str] | None = None) -> list[IconRecord]:
        """
        Case-insensitive substring search over icon names and search terms.

        Args:
            query: Substring to look for (an empty query matches everything)
            styles: Optional style filter; None or empty means all styles

        Returns:
            Matching records ordered by (name, style)
        """
        needle = query.casefold()
        allowed = set(styles) if styles else None

        matches = [
            r
            for r in self._records.values()
            if (allowed is None or r.style in allowed)
            and (needle in r.name.casefold() or any(needle in term.casefold() for term in r.search_terms))
        ]
        return sorted(matches, key=lambda r: (r.name, r.style))
