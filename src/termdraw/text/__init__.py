"""
Utilities for rendering text: character grids, bordered boxes, and tables.
"""
from ._box import *
from ._table import *
from ._text import *
