import pytest

from autofeature.domain.enums import ResolutionPolicy


@pytest.mark.parametrize("raw", ["first_match", "firstMatch", "FIRST_MATCH", "First-Match", " first match "])
def test_parse_first_match_spellings(raw):
    assert ResolutionPolicy.parse(raw) is ResolutionPolicy.first_match


@pytest.mark.parametrize("raw", ["pooled_random", "pooledRandom", "POOLED-RANDOM", "Pooled__Random"])
def test_parse_pooled_random_spellings(raw):
    assert ResolutionPolicy.parse(raw) is ResolutionPolicy.pooled_random


@pytest.mark.parametrize("raw", ["", "random", "first_match_x", None])
def test_parse_rejects_unknown(raw):
    with pytest.raises(ValueError):
        ResolutionPolicy.parse(raw)
