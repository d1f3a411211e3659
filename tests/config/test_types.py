import pytest

from slime_search.config.constants import MAX_COORDINATE
from slime_search.config.types import ScanConfig


def test_scan_config_defaults_match_constants() -> None:
    config = ScanConfig()
    assert config.radius == 5_000
    assert config.spacing == 2
    assert config.min_size == 14
    assert config.rectangles_only is True
    assert config.allow_one_wides is True


def test_rect_area_threshold_defaults_to_min_size() -> None:
    assert ScanConfig(min_size=7).rect_area_threshold == 7
    assert ScanConfig(min_size=7, min_rect_area=20).rect_area_threshold == 20


@pytest.mark.parametrize(
    "kwargs",
    [
        {"radius": 0},
        {"radius": MAX_COORDINATE + 1},
        {"spacing": 0},
        {"min_size": 0},
        {"min_rect_area": 0},
    ],
)
def test_scan_config_rejects_invalid_values(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        ScanConfig(**kwargs)


def test_scan_config_is_frozen() -> None:
    config = ScanConfig()
    with pytest.raises(AttributeError):
        config.radius = 10  # type: ignore[misc]
