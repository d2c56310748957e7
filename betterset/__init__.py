'''Finite set theory with value semantics: immutable Sets, Kuratowski ordered pairs, and Relations'''

__author__ = 'The betterset developers'

from .foundations import *

from ._version import __version__

TOOLKIT_NAME : str = 'betterset'
