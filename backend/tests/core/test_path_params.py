"""Path Parameters — verifies verbatim prefix stripping and malformed-path errors."""

import pytest

from continent_api.core.errors import MalformedPathError
from continent_api.core.path_params import CONTINENTS_PREFIX, extract_path_parameter


def test_default_prefix_is_continents():
    assert CONTINENTS_PREFIX == "/continents/"


@pytest.mark.parametrize("path,expected", [
    ("/continents/asia", "asia"),
    ("/continents/north_america", "north_america"),
    ("/continents/", ""),
    ("/continents/ asia ", " asia "),
    ("/continents/a/b", "a/b"),
    ("/continents/north%20america", "north%20america"),
])
def test_extracts_remainder_verbatim(path, expected):
    assert extract_path_parameter(path) == expected


def test_custom_prefix():
    assert extract_path_parameter("/api/v2/regions/x", "/api/v2/regions/") == "x"


@pytest.mark.parametrize("path", ["/continent/asia", "/continents", "asia", ""])
def test_path_outside_prefix_raises(path):
    with pytest.raises(MalformedPathError) as exc_info:
        extract_path_parameter(path)
    assert exc_info.value.http_status == 400
    assert exc_info.value.path == path
