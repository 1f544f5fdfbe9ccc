"""
Terminal primitives: ANSI styling, terminal size queries, and an explicit
screen buffer.

Inspired by
http://en.wikipedia.org/wiki/ANSI_escape_code#Colors
"""
from ._ansi import *
from ._screen import *
from ._size import *
