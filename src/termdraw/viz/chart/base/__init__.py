"""
Base classes for line chart styles.
"""
from ._style import *
