'''Tools for simplifying iteration over collections of items'''

__author__ = 'The betterset developers'

from typing import (
    Callable,
    Generator,
    Iterable,
    Sequence,
    TypeVar,
)
T = TypeVar('T')


def inclusion_masks(n : int) -> Generator[int, None, None]:
    '''
    Generate all 2**n bitmasks over n positions, in ascending order
    Bit i of each mask being set indicates that the i-th item of a sequence is included
    '''
    if n < 0:
        raise ValueError(f'Number of positions to mask must be non-negative, not {n}')
    yield from range(1 << n)

def masked_selection(items : Sequence[T], mask : int) -> Generator[T, None, None]:
    '''
    Generates the items of a sequence whose positions are flagged in an inclusion bitmask, in sequence order
    E.g. : masked_selection('ABCD', 0b1010) --> B, D
    '''
    for i, item in enumerate(items):
        if mask & (1 << i):
            yield item

def bipartition(items : Iterable[T], predicate : Callable[[T], bool]) -> tuple[list[T], list[T]]:
    '''
    Split a collection of items into those which satisfy a predicate and those which don't
    Relative order of items is preserved within each part

    Parameters
    ----------
    items : Iterable[T]
        The items to divide
    predicate : Callable[[T], bool]
        Condition to test each item against; the result is interpreted by truthiness

    Returns
    -------
    accepted : list[T]
        The items for which the predicate holds
    rejected : list[T]
        The items for which the predicate does not hold
    '''
    accepted : list[T] = []
    rejected : list[T] = []
    for item in items:
        (accepted if predicate(item) else rejected).append(item)

    return accepted, rejected
