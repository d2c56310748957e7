'''Structural keys, for filing arbitrary (possibly unhashable) values into dictionary-backed Sets'''

__author__ = 'The betterset developers'

from typing import (
    Any,
    Hashable,
    Protocol,
    runtime_checkable,
)
from dataclasses import dataclass


@runtime_checkable
class Canonicalizable(Protocol):
    '''Object with a notion of a canonical representative shared by all instances which are equal to it'''
    def canonical_form(self) -> Hashable:
        ...

@dataclass(frozen=True)
class FrozenView:
    '''
    Hashable stand-in for a mutable builtin container, compared by content

    The container type is recorded alongside the frozen content so that,
    e.g., a list and a tuple with the same items are never confused for one another
    '''
    kind : type
    content : Hashable

def is_hashable(value : Any) -> bool:
    '''Whether a value can be hashed as-is (a tuple is only hashable if all of its items are)'''
    try:
        hash(value)
    except TypeError:
        return False
    return True

def structural_key(value : Any) -> Hashable:
    '''
    Produce the key under which a value is filed inside a Set

    Hashable values are their own key, so that lookups agree with Python's native
    notion of equality; mutable builtin containers are frozen recursively by content

    Parameters
    ----------
    value : Any
        The value to produce a key for

    Returns
    -------
    key : Hashable
        A hashable key which is equal to the key of any value structurally equal to "value"

    Raises
    ------
    TypeError
        If the value is unhashable and is not a container type which can be frozen
    '''
    if is_hashable(value):
        return value

    if isinstance(value, (list, tuple)):
        return FrozenView(kind=type(value), content=tuple(structural_key(item) for item in value))
    elif isinstance(value, dict):
        return FrozenView(
            kind=type(value),
            content=frozenset(
                (structural_key(key), structural_key(item))
                    for key, item in value.items()
            ),
        )
    elif isinstance(value, set):
        return FrozenView(kind=set, content=frozenset(structural_key(item) for item in value))
    elif isinstance(value, bytearray):
        return FrozenView(kind=bytearray, content=bytes(value))
    else:
        raise TypeError(f'Cannot derive a structural key for unhashable value of type {type(value).__name__}')
