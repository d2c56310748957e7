'''Binary relations, as Sets of ordered pairs'''

__author__ = 'The betterset developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Any,
    ClassVar,
    Hashable,
    Iterator,
)
from collections import defaultdict

import networkx as nx

from .canonicalize import structural_key
from .sets import Set, InvalidOperandError, check_set_operands
from .pairs import OrderedPair


class Relation:
    '''
    A finite binary relation, i.e. a Set whose elements are all OrderedPairs

    The pairs are taken on trust; only the container is checked to be a Set,
    so Relations should be built from known-good pair Sets (e.g. those produced by Set.cartesian_product)

    Parameters
    ----------
    pairs : Set
        A Set of OrderedPairs, each <a, b> of which asserts that "a" is related to "b"
    '''
    PAIR_EDGE_ATTR : ClassVar[str] = 'pair'

    __slots__ = ('_pairs',)

    def __init__(self, pairs : Set) -> None:
        check_set_operands(pairs)
        object.__setattr__(self, '_pairs', pairs)

    def __setattr__(self, name : str, value : Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable; cannot assign attribute "{name}"')

    def __delattr__(self, name : str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable; cannot delete attribute "{name}"')

    def __reduce__(self) -> tuple[type, tuple[Set]]:
        return (Relation, (self._pairs,))

    @property
    def pairs(self) -> Set:
        '''The Set of OrderedPairs underlying this Relation'''
        return self._pairs

    def __iter__(self) -> Iterator[OrderedPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return self._pairs.cardinality()

    def __contains__(self, pair : Any) -> bool:
        return self._pairs.is_member(pair)

    def canonical_form(self) -> frozenset[Hashable]:
        return self._pairs.canonical_form()

    def __eq__(self, other : Any) -> bool:
        if not isinstance(other, Relation):
            return False
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return self._pairs.inspect()
    inspect = __repr__

    # Derived Sets and Relations
    def domain(self) -> Set:
        '''The Set of all leading coordinates of pairs in this Relation'''
        return Set(*(pair.first for pair in self))

    def range(self) -> Set:
        '''The Set of all trailing coordinates of pairs in this Relation'''
        return Set(*(pair.second for pair in self))

    def inverse(self) -> 'Relation':
        '''The Relation with every pair reversed, i.e. {<b, a> : <a, b> in this Relation}'''
        return Relation(self._pairs.map(OrderedPair.reversed))

    def compose(self, other : 'Relation') -> 'Relation':
        '''
        The Relation obtained by following this Relation, then the other

        Contains <a, c> whenever some "b" exists with <a, b> in this Relation and <b, c> in the other
        '''
        if not isinstance(other, Relation):
            raise InvalidOperandError('Argument must be a Relation')

        successors : dict[Hashable, list[Any]] = defaultdict(list)
        for pair in other:
            successors[structural_key(pair.first)].append(pair.second)

        composite = Relation(Set(*(
            OrderedPair(pair.first, target)
                for pair in self
                    for target in successors.get(structural_key(pair.second), [])
        )))
        LOGGER.debug(f'Composed {len(self)}-pair Relation with {len(other)}-pair Relation, yielding {len(composite)} pairs')

        return composite

    def is_function(self) -> bool:
        '''Whether every element of the domain is related to exactly one element'''
        return self.domain().cardinality() == len(self)

    def to_graph(self) -> nx.DiGraph:
        '''
        Directed graph with a node for each element of the domain and range and an edge a -> b for each pair <a, b>

        Nodes are the structural keys of the related elements, with the elements themselves stored under the "value" node attribute;
        each edge carries the OrderedPair it was drawn from, under the attribute named by Relation.PAIR_EDGE_ATTR
        '''
        graph = nx.DiGraph()
        for pair in self:
            source, target = pair.first, pair.second
            graph.add_node(structural_key(source), value=source)
            graph.add_node(structural_key(target), value=target)
            graph.add_edge(structural_key(source), structural_key(target), **{self.PAIR_EDGE_ATTR : pair})

        return graph
