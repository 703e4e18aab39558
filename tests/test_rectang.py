import itertools

import pytest

from snplabs.rectang import is_rectangular


@pytest.mark.parametrize("sides", [(3, 4, 5), (5, 4, 3), (3, 5, 4), (33, 44, 55)])
def test_right_angled(sides):
    assert is_rectangular(*sides) is True


@pytest.mark.parametrize("sides", [(3, 4, 6), (5, 4, 4), (3, 5, 5), (33, 43, 55)])
def test_not_right_angled(sides):
    assert is_rectangular(*sides) is False


def test_all_zero_is_not_right_angled():
    assert is_rectangular(0, 0, 0) is False


@pytest.mark.parametrize("sides", [(3, 4, 5), (3, 4, 6), (6, 8, 10), (1, 1, 1)])
def test_order_does_not_matter(sides):
    results = {is_rectangular(*p) for p in itertools.permutations(sides)}
    assert len(results) == 1