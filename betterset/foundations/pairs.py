'''Ordered pairs, constructed purely out of Sets'''

__author__ = 'The betterset developers'

from typing import Any

from .sets import Set


class OrderedPair(Set):
    '''
    The ordered pair <first, second>, encoded as the Set {{first}, {first, second}} (per Kuratowski)

    Neither coordinate is stored directly; both are recovered from the encoding on access
    When both coordinates are equal, the two members of the encoding coincide and the pair is the Set {{first}}

    Parameters
    ----------
    first : Any
        The leading coordinate of the pair
    second : Any
        The trailing coordinate of the pair
    '''
    __slots__ = ()

    def __init__(self, first : Any, second : Any) -> None:
        super().__init__(Set(first), Set(first, second))

    def __reduce__(self) -> tuple[type, tuple[Any, Any]]:
        return (OrderedPair, (self.first, self.second))

    @property
    def first(self) -> Any:
        '''The element common to both members of the encoding'''
        return Set.big_intersection(*self).arbitrary_element()

    @property
    def second(self) -> Any:
        '''The element of the larger member of the encoding which isn't the first coordinate'''
        first = self.first
        if self.cardinality() == 1: # degenerate pair <a, a> collapses to {{a}}
            return first

        wider = max(self, key=len)
        return wider.remove(first).arbitrary_element()

    def astuple(self) -> tuple[Any, Any]:
        '''The coordinates of this pair as a native Python 2-tuple'''
        return (self.first, self.second)

    def reversed(self) -> 'OrderedPair':
        '''The pair with coordinates swapped, i.e. <second, first>'''
        return OrderedPair(self.second, self.first)

    def __eq__(self, other : Any) -> bool:
        if not isinstance(other, OrderedPair):
            return False
        return (self.first == other.first) and (self.second == other.second)

    def __ne__(self, other : Any) -> bool: # needed for precedence over the inherited Set comparison
        return not (self == other)

    __hash__ = Set.__hash__ # overriding __eq__ would otherwise unset the hash

    def inspect(self) -> str:
        return f'<{self.first!r}, {self.second!r}>'
