import pytest

from infrastructure.observability import make_run_tag
from infrastructure.utils import humanize_style


@pytest.mark.parametrize(
    ("style", "label"),
    [
        ("solid", "Solid"),
        ("sharp-solid", "Sharp Solid"),
        ("sharp-duotone-light", "Sharp Duotone Light"),
        ("custom_icons", "Custom Icons"),
    ],
)
def test_humanize_style(style: str, label: str) -> None:
    assert humanize_style(style) == label


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20240101_000000_fa-pro") == make_run_tag("20240101_000000_fa-pro")
    assert len(make_run_tag("anything")) == 8
    assert make_run_tag("a") != make_run_tag("b")
