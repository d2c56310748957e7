'''Core set-theoretic objects, all built up out of Sets alone'''

__author__ = 'The betterset developers'

from .canonicalize import Canonicalizable, FrozenView, structural_key
from .sets import Set, InvalidOperandError, EmptySetError
from .pairs import OrderedPair
from .relations import Relation
