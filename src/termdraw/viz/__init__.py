"""
A lean MVC framework for rendering visualizations in different styles, e.g.,
as plain text or as `matplotlib` charts.
"""

from ._matplot import *
from ._text import *
from ._viz import *
