import math
from datetime import datetime, UTC

import pytest

from chaincodec.core.codec.normalizer import normalize

NEW_YEAR = datetime(2021, 1, 1, tzinfo=UTC)
NEW_YEAR_MS = 1609459200000


@pytest.mark.ut
def test_normalize_date():
    assert normalize(NEW_YEAR) == NEW_YEAR_MS


@pytest.mark.ut
@pytest.mark.parametrize("value", ["abc", 1, 1.5, True, None, b"raw"])
def test_normalize_leaves_scalars_untouched(value):
    assert normalize(value) is value


@pytest.mark.ut
def test_normalize_nested_containers():
    value = {
        "created": NEW_YEAR,
        "tags": ["a", NEW_YEAR],
        "owner": {"since": NEW_YEAR, "name": "alice"},
        "pair": (1, NEW_YEAR),
    }

    assert normalize(value) == {
        "created": NEW_YEAR_MS,
        "tags": ["a", NEW_YEAR_MS],
        "owner": {"since": NEW_YEAR_MS, "name": "alice"},
        "pair": [1, NEW_YEAR_MS],
    }


@pytest.mark.ut
def test_normalize_does_not_mutate_input():
    value = {"tags": [NEW_YEAR]}
    out = normalize(value)

    assert value == {"tags": [NEW_YEAR]}
    assert out is not value
    assert out["tags"] is not value["tags"]


@pytest.mark.ut
def test_normalize_keeps_keys():
    assert normalize({1: "a", "b": 2}) == {1: "a", "b": 2}


@pytest.mark.ut
def test_normalize_non_finite_floats_to_none():
    value = {"a": math.nan, "b": [math.inf, -math.inf], "c": 2.5}
    assert normalize(value) == {"a": None, "b": [None, None], "c": 2.5}
