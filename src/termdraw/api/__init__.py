"""
Basic tools for API development, supporting documentation and run-time
validation.
"""
from ._alltracker import *
from ._api import *
from ._decorators import *
