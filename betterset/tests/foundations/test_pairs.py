'''Unit tests for Kuratowski-encoded ordered pairs'''

__author__ = 'The betterset developers'

import pytest

from typing import Any

from betterset.foundations.sets import Set
from betterset.foundations.pairs import OrderedPair


# coordinate recovery tests
@pytest.mark.parametrize(
    'first, second',
    [
        (1, 2),
        (2, 1),
        (1, 1),
        ('a', Set()),
        (Set(1, 2), OrderedPair(3, 4)),
        ([1, 'hey'], {'foo' : 'bar'}),
    ]
)
def test_coordinates_recovered(first : Any, second : Any) -> None:
    '''Test that both coordinates can be recovered from the set-theoretic encoding'''
    pair = OrderedPair(first, second)
    assert (pair.first == first) and (pair.second == second)

def test_encoding() -> None:
    '''Test that a pair is the Set {{first}, {first, second}}'''
    pair = OrderedPair(1, 2)
    assert pair.to_a() == [Set(1), Set(1, 2)]

def test_degenerate_encoding() -> None:
    '''Test that a pair with equal coordinates collapses to the Set {{first}}'''
    pair = OrderedPair(1, 1)

    assert pair.cardinality() == 1
    assert pair.to_a() == [Set(1)]
    assert (pair.first == 1) and (pair.second == 1)

def test_pair_is_set() -> None:
    '''Test that pairs are Sets, and Set operations on them produce plain Sets'''
    pair = OrderedPair(1, 2)
    merged = pair.union(Set(Set(3)))

    assert isinstance(pair, Set)
    assert pair.is_member(Set(2, 1))
    assert type(merged) is Set

def test_pair_vs_encoding() -> None:
    '''Test that a pair and its encoding as a plain Set contain one another, but are not equal'''
    pair = OrderedPair(1, 2)
    encoding = Set(Set(1), Set(1, 2))

    assert (encoding <= pair) and (encoding >= pair)
    assert (pair <= encoding) and (pair >= encoding)
    assert (encoding != pair) and (pair != encoding)

# equality tests
@pytest.mark.parametrize(
    'pair1, pair2, expected_equal',
    [
        (OrderedPair(1, 2), OrderedPair(1, 2), True),
        (OrderedPair(1, 2), OrderedPair(2, 1), False),
        (OrderedPair(1, 1), OrderedPair(1, 1), True),
        (OrderedPair(1, 1), OrderedPair(1, 2), False),
        (OrderedPair(Set(1, 2), 3), OrderedPair(Set(2, 1), 3), True),
    ]
)
def test_equality(pair1 : OrderedPair, pair2 : OrderedPair, expected_equal : bool) -> None:
    '''Test that pairs are equal exactly when their coordinates are equal, in order'''
    assert (pair1 == pair2) == expected_equal

@pytest.mark.parametrize(
    'other',
    [
        (1, 2),
        'hey',
        Set(Set(1), Set(1, 2)),
    ]
)
def test_equality_non_pairs(other : Any) -> None:
    '''Test that a pair is never equal to anything which isn't a pair, even its own encoding as a plain Set'''
    pair = OrderedPair(1, 2)
    assert (pair != other) and (other != pair)

def test_equal_pairs_hash_equally() -> None:
    '''Test that equal pairs share a hash and are deduplicated when collected'''
    assert hash(OrderedPair(1, 2)) == hash(OrderedPair(1, 2))
    assert Set(OrderedPair(1, 2), OrderedPair(1, 2), OrderedPair(2, 1)).cardinality() == 2

# conversion tests
def test_astuple() -> None:
    '''Test conversion to a native tuple'''
    assert OrderedPair('a', 'b').astuple() == ('a', 'b')

def test_reversed() -> None:
    '''Test that reversal swaps coordinates'''
    assert OrderedPair(1, 2).reversed() == OrderedPair(2, 1)
    assert OrderedPair(1, 1).reversed() == OrderedPair(1, 1)

# display tests
@pytest.mark.parametrize(
    'pair, expected_repr',
    [
        (OrderedPair(1, 2), '<1, 2>'),
        (OrderedPair(1, 1), '<1, 1>'),
        (OrderedPair('a', Set()), "<'a', ∅>"),
        (OrderedPair(Set(1), OrderedPair(2, 3)), '<{1}, <2, 3>>'),
    ]
)
def test_repr(pair : OrderedPair, expected_repr : str) -> None:
    '''Test that pairs are rendered as their coordinates in angled brackets'''
    assert (repr(pair) == expected_repr) and (str(pair) == expected_repr)

def test_repr_within_set() -> None:
    '''Test that pairs collected into a Set are rendered as pairs'''
    assert repr(Set(OrderedPair(1, 2))) == '{<1, 2>}'
