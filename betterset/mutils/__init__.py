'''Generic utilities which are not specific to set theory'''

__author__ = 'The betterset developers'
