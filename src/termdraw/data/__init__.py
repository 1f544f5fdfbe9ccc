"""
Tabular data to be rendered by the ``termdraw`` charts and tables.
"""
from ._table import *
