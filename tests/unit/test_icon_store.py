import pytest
from pydantic import ValidationError

from domain.schemas import IconRecord
from domain.store import IconStore


def _record(name: str, style: str = "solid", *, body: str = '<path d="M0 0"/>', terms: list[str] | None = None) -> IconRecord:
    return IconRecord(
        name=name,
        style=style,
        body=body,
        width=512,
        height=512,
        view_box="0 0 512 512",
        unicode="f000",
        search_terms=terms or [],
    )


def test_upsert_is_last_write_wins() -> None:
    store = IconStore()
    store.upsert(_record("house", body='<path d="M1 1"/>'))
    store.upsert(_record("house", body='<path d="M2 2"/>'))

    assert len(store) == 1
    assert store.get("house", "solid").body == '<path d="M2 2"/>'  # type: ignore[union-attr]


def test_same_name_in_two_styles_is_two_records() -> None:
    store = IconStore()
    store.upsert(_record("house", "solid"))
    store.upsert(_record("house", "regular"))

    assert len(store) == 2
    assert ("house", "regular") in store
    assert store.count("solid") == 1


def test_list_styles_is_sorted_and_distinct() -> None:
    store = IconStore()
    for name, style in [("a", "thin"), ("b", "brands"), ("c", "solid"), ("d", "brands"), ("e", "duotone")]:
        store.upsert(_record(name, style))

    assert store.list_styles() == ["brands", "duotone", "solid", "thin"]


def test_list_by_style_is_ordered_by_name() -> None:
    store = IconStore()
    for name in ["zebra", "anchor", "mug"]:
        store.upsert(_record(name))
    store.upsert(_record("bolt", "regular"))

    assert [r.name for r in store.list_by_style("solid")] == ["anchor", "mug", "zebra"]
    assert store.list_by_style("light") == []


def test_search_matches_names_and_terms_case_insensitively() -> None:
    store = IconStore()
    store.upsert(_record("house", terms=["Home", "building"]))
    store.upsert(_record("warehouse", "regular"))
    store.upsert(_record("mug", terms=["coffee"]))

    assert [(r.name, r.style) for r in store.search("HOUSE")] == [("house", "solid"), ("warehouse", "regular")]
    assert [r.name for r in store.search("home")] == ["house"]
    assert [r.name for r in store.search("COF")] == ["mug"]
    assert store.search("zzz") == []


def test_search_can_be_restricted_to_styles() -> None:
    store = IconStore()
    store.upsert(_record("house", "solid"))
    store.upsert(_record("house", "regular"))
    store.upsert(_record("house", "light"))

    assert [r.style for r in store.search("house", ["regular", "light"])] == ["light", "regular"]
    assert len(store.search("house", [])) == 3


def test_iteration_orders_by_name_then_style() -> None:
    store = IconStore()
    store.upsert(_record("b", "solid"))
    store.upsert(_record("a", "solid"))
    store.upsert(_record("a", "brands"))

    assert [(r.name, r.style) for r in store] == [("a", "brands"), ("a", "solid"), ("b", "solid")]


def test_icon_record_rejects_empty_body_and_non_positive_size() -> None:
    with pytest.raises(ValidationError):
        _record("house", body="")
    with pytest.raises(ValidationError):
        IconRecord(name="house", style="solid", body="<g/>", width=0, height=512, view_box="0 0 0 512")
