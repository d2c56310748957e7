'''Immutable finite sets with structural equality, and the algebra of set theory over them'''

__author__ = 'The betterset developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Hashable,
    Iterable,
    Iterator,
)
from copy import deepcopy
from functools import reduce as fold
from itertools import product as cartesian

from .canonicalize import FrozenView, structural_key
from ..mutils.iteration import bipartition, inclusion_masks, masked_selection

if TYPE_CHECKING:
    from .relations import Relation


class InvalidOperandError(TypeError):
    '''Raised when an operation which must produce a Set is handed an operand which is not a Set'''
    pass

class EmptySetError(ValueError):
    '''Raised when an operation which requires at least one element is invoked on the empty Set'''
    pass

def check_set_operands(*operands : Any) -> None:
    '''Verify that every one of the operands passed is a Set, raising InvalidOperandError otherwise'''
    for operand in operands:
        if not isinstance(operand, Set):
            raise InvalidOperandError('Argument must be a Set')

_NO_INITIAL = object() # sentinel for folds with no initial value supplied

def _detached(key : Hashable, element : Any) -> Any:
    '''Copy of an element filed under a frozen key, so that no caller ever shares mutable state with a Set'''
    if isinstance(key, FrozenView):
        return deepcopy(element)
    return element

def _set_from_members(members : dict[Hashable, Any]) -> 'Set':
    '''Build a plain Set directly from an already-keyed member mapping, bypassing re-keying of elements'''
    new_set = Set.__new__(Set)
    object.__setattr__(new_set, '_members', members)
    object.__setattr__(new_set, '_hash', None)

    return new_set


class Set:
    '''
    A finite, immutable collection of distinct values

    Elements may be any values, including other Sets, and are compared structurally (i.e. by content, not identity)
    Order of insertion is remembered for iteration and display, but plays no part in equality;
    every operation which would "modify" a Set instead returns a new Set

    Parameters
    ----------
    *elements : Any
        The values to collect; values equal to one already collected are silently discarded
    '''
    EMPTY_SET_SYMBOL : ClassVar[str] = '∅'
    POWERSET_WARNING_CARDINALITY : ClassVar[int] = 20

    __slots__ = ('_members', '_hash')

    def __init__(self, *elements : Any) -> None:
        members : dict[Hashable, Any] = {}
        for element in elements:
            key = structural_key(element)
            if key not in members: # first occurrence wins
                members[key] = _detached(key, element)
        object.__setattr__(self, '_members', members)
        object.__setattr__(self, '_hash', None)

    def __setattr__(self, name : str, value : Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable; cannot assign attribute "{name}"')

    def __delattr__(self, name : str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable; cannot delete attribute "{name}"')

    def __reduce__(self) -> tuple[type, tuple[Any, ...]]:
        return (Set, tuple(self._members.values()))


    # Membership and introspection
    def is_member(self, element : Any) -> bool:
        '''Whether the given value is (structurally) an element of this Set'''
        return structural_key(element) in self._members
    __contains__ = is_member

    def cardinality(self) -> int:
        '''Number of distinct elements in this Set'''
        return len(self._members)

    def __len__(self) -> int:
        return self.cardinality()

    def is_empty(self) -> bool:
        '''Whether this Set has no elements'''
        return self.cardinality() == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def to_a(self) -> list[Any]:
        '''List of the elements of this Set, in the order they were first inserted'''
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        return (_detached(key, element) for key, element in self._members.items())

    def arbitrary_element(self) -> Any:
        '''
        Select an element of this Set

        "Arbitrary" in that the caller has no say in which element is chosen;
        the choice is nevertheless stable, namely the first element inserted,
        and repeated calls on the same Set always return the same element
        '''
        for key, element in self._members.items():
            return _detached(key, element)
        raise EmptySetError('Cannot select an element from the empty Set')

    def canonical_form(self) -> frozenset[Hashable]:
        '''Order-independent representative of this Set, shared by all Sets equal to it'''
        return frozenset(self._members.keys())


    # Non-mutating updates
    def add(self, element : Any) -> 'Set':
        '''Return a new Set containing the elements of this Set and the given element'''
        members = dict(self._members)
        key = structural_key(element)
        if key not in members:
            members[key] = _detached(key, element)

        return _set_from_members(members)

    def remove(self, element : Any) -> 'Set':
        '''Return a new Set containing the elements of this Set, excluding the given element (if present)'''
        members = dict(self._members)
        members.pop(structural_key(element), None)

        return _set_from_members(members)


    # Binary algebra
    def union(self, other : 'Set') -> 'Set':
        '''The Set of elements present in either this Set or the other'''
        check_set_operands(other)
        members = dict(self._members)
        for key, element in other._members.items():
            members.setdefault(key, element)

        return _set_from_members(members)
    __or__ = union

    def intersection(self, other : 'Set') -> 'Set':
        '''The Set of elements present in both this Set and the other'''
        check_set_operands(other)
        return _set_from_members({
            key : element
                for key, element in self._members.items()
                    if key in other._members
        })
    __and__ = intersection

    def difference(self, other : 'Set') -> 'Set':
        '''The Set of elements present in this Set but absent from the other'''
        check_set_operands(other)
        return _set_from_members({
            key : element
                for key, element in self._members.items()
                    if key not in other._members
        })
    __sub__ = difference

    def cartesian_product(self, other : 'Set') -> 'Relation':
        '''
        The Relation comprising every ordered pair <a, b> with "a" drawn from this Set and "b" from the other

        Pairs are produced with this Set's elements varying slowest, i.e. in
        the order of this Set as the outer loop and the other Set as the inner loop
        '''
        check_set_operands(other)
        # DEV: deferred imports, since both pairs and relations are built atop this module
        from .pairs import OrderedPair
        from .relations import Relation

        pairs = Set(*(OrderedPair(a, b) for a, b in cartesian(self, other)))
        LOGGER.debug(f'Formed cartesian product of {self.cardinality()}-element and {other.cardinality()}-element Sets')

        return Relation(pairs)
    __mul__ = cartesian_product


    # N-ary algebra
    @classmethod
    def big_union(cls, *sets : 'Set') -> 'Set':
        '''The union of any number of Sets; the union of no Sets at all is the empty Set'''
        check_set_operands(*sets)
        return fold(Set.union, sets, Set())

    @classmethod
    def big_intersection(cls, *sets : 'Set') -> 'Set':
        '''
        The intersection of one or more Sets

        Intersecting no Sets at all is rejected, as that would
        require a universe of discourse to take the complement within
        '''
        check_set_operands(*sets)
        if not sets:
            raise InvalidOperandError('Intersection requires at least one Set')

        return fold(Set.intersection, sets[1:], _set_from_members(dict(sets[0]._members))) # seeded with a plain Set, even for Set subclasses


    # Relational predicates
    ## DEV: unlike the algebra above, these treat a non-Set as simply "not related" rather than raising
    def is_subset(self, other : Any) -> bool:
        '''Whether every element of this Set is also an element of the other'''
        if not isinstance(other, Set):
            return False
        if self.cardinality() > other.cardinality():
            return False

        return all(key in other._members for key in self._members)
    __le__ = is_subset

    def is_proper_subset(self, other : Any) -> bool:
        '''Whether this Set is a subset of the other, without being equal to it'''
        return self.is_subset(other) and (self.cardinality() < other.cardinality())
    __lt__ = is_proper_subset

    def is_superset(self, other : Any) -> bool:
        '''Whether every element of the other Set is also an element of this Set'''
        if not isinstance(other, Set):
            return False
        return other.is_subset(self)
    __ge__ = is_superset

    def is_proper_superset(self, other : Any) -> bool:
        '''Whether this Set is a superset of the other, without being equal to it'''
        if not isinstance(other, Set):
            return False
        return other.is_proper_subset(self)
    __gt__ = is_proper_superset

    def __eq__(self, other : Any) -> bool:
        '''
        Extensional equality, i.e. each Set is a subset of the other; never equal to a non-Set

        The one exception is an OrderedPair, which only ever equals another OrderedPair;
        since OrderedPair overrides this comparison, a plain Set is therefore unequal to its
        Kuratowski encoding as a pair, even though each is a subset of the other
        '''
        if not isinstance(other, Set):
            return False
        return self.is_subset(other) and other.is_subset(self) # extensionality

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, '_hash', hash(self.canonical_form()))
        return self._hash


    # Combinatorics
    def powerset(self) -> 'Set':
        '''
        The Set of all subsets of this Set, including the empty Set and this Set itself

        Contains 2**n members for a Set of n elements; one subset is built
        for each inclusion bitmask over the elements in insertion order
        '''
        items = list(self._members.items())
        n = len(items)
        if n > self.POWERSET_WARNING_CARDINALITY:
            LOGGER.warning(f'Computing the powerset of a {n}-element Set will produce {1 << n} subsets; this may take a while!')

        subsets = Set(*(
            _set_from_members(dict(masked_selection(items, mask)))
                for mask in inclusion_masks(n)
        ))
        LOGGER.debug(f'Generated powerset with {subsets.cardinality()} members from {n}-element Set')

        return subsets

    def partition(self, predicate : Callable[[Any], bool]) -> 'Set':
        '''
        Divide this Set into the subset of elements satisfying a predicate and the subset of those which don't

        Returns a Set whose members are those two subsets; either may be empty,
        and when both are (i.e. when partitioning the empty Set) they coincide into one
        '''
        accepted, rejected = bipartition(self._members.items(), lambda item : predicate(_detached(*item)))
        LOGGER.debug(f'Partitioned {self.cardinality()}-element Set into parts of size {len(accepted)} and {len(rejected)}')

        return Set(_set_from_members(dict(accepted)), _set_from_members(dict(rejected)))


    # Enumeration
    def all(self, predicate : Callable[[Any], bool]=bool) -> bool:
        '''Whether every element satisfies the predicate (vacuously True for the empty Set)'''
        return all(predicate(element) for element in self)

    def any(self, predicate : Callable[[Any], bool]=bool) -> bool:
        '''Whether at least one element satisfies the predicate'''
        return any(predicate(element) for element in self)

    def none(self, predicate : Callable[[Any], bool]=bool) -> bool:
        '''Whether no element satisfies the predicate'''
        return not self.any(predicate)

    def reduce(self, function : Callable[[Any, Any], Any], initial : Any=_NO_INITIAL) -> Any:
        '''Fold the elements of this Set with a binary function, in insertion order'''
        if initial is _NO_INITIAL:
            if self.is_empty():
                raise EmptySetError('Cannot reduce the empty Set without an initial value')
            return fold(function, self)
        return fold(function, self, initial)

    def select(self, predicate : Callable[[Any], bool]) -> 'Set':
        '''The subset of elements which satisfy the predicate'''
        return _set_from_members({
            key : element
                for key, element in self._members.items()
                    if predicate(_detached(key, element))
        })

    def reject(self, predicate : Callable[[Any], bool]) -> 'Set':
        '''The subset of elements which do NOT satisfy the predicate'''
        return self.select(lambda element : not predicate(element))

    def map(self, function : Callable[[Any], Any]) -> 'Set':
        '''The image of this Set under a function; images which coincide are merged'''
        return Set(*(function(element) for element in self))


    # Display
    def inspect(self) -> str:
        '''Textual rendering of this Set, in the brace-delimited notation of set theory'''
        if self.is_empty():
            return self.EMPTY_SET_SYMBOL
        return '{' + ', '.join(repr(element) for element in self) + '}'

    def __repr__(self) -> str:
        return self.inspect()

    def __str__(self) -> str:
        return self.inspect()

    @classmethod
    def from_iterable(cls, elements : Iterable[Any]) -> 'Set':
        '''Collect the values of any iterable into a Set'''
        return Set(*elements)
