"""
Terminal rendering toolkit: ANSI styling, screen buffers, bordered boxes,
text tables, and ASCII line charts.
"""

__version__ = "1.0.0"
