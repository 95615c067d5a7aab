import numpy as np
import pytest

from ConsentCodec import IdSet


def test_membership_and_order() -> None:
    ids = IdSet([9, 1, 4])
    assert list(ids) == [1, 4, 9]
    assert len(ids) == 3
    assert 4 in ids
    assert 5 not in ids
    assert 0 not in ids
    assert 100 not in ids
    assert "4" not in ids


def test_equality() -> None:
    assert IdSet([1, 2]) == IdSet([2, 1])
    assert IdSet([1, 2]) == {1, 2}
    assert IdSet([1, 2]) != {1}
    assert IdSet.from_mask([False] * 50) == IdSet()


def test_mask_conversion() -> None:
    ids = IdSet.from_mask(np.array([True, False, True]))
    assert ids == {1, 3}
    assert ids.to_mask(5).tolist() == [True, False, True, False, False]
    assert ids.to_mask(2).tolist() == [True, False]


def test_add_and_discard() -> None:
    ids = IdSet()
    ids.add(300)
    ids.add(2)
    ids.discard(300)
    ids.discard(7)
    assert list(ids) == [2]


def test_identifiers_are_one_based() -> None:
    with pytest.raises(ValueError):
        IdSet([0])
