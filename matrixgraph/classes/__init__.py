"""
Core data classes for graph representation.

This module contains the entities and containers used throughout
the matrixgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .handle_list import pyhandlelist, pynode
from .labels import DFSLabel, BFSLabel

__all__ = [
    'pyvertex',
    'pyedge',
    'pyhandlelist',
    'pynode',
    'DFSLabel',
    'BFSLabel',
]
