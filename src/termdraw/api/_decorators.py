"""
Decorators for :mod:`termdraw.api`.
"""

import logging
from typing import Any, Callable, Optional, Type, TypeVar

from ._alltracker import AllTracker

log = logging.getLogger(__name__)

#
# Type variables
#

T_Type = TypeVar("T_Type", bound=Type[Any])

__all__ = ["inheritdoc"]

__tracker = AllTracker(globals())


def inheritdoc(*, match: str) -> Callable[[T_Type], T_Type]:
    """
    Class decorator replacing placeholder docstrings with the docstrings of the
    overridden members.

    Usage:

    .. code-block:: python

      @inheritdoc(match="[see superclass]")
      class TextStyle(DrawingStyle):
          def start_drawing(self, *, title: str, **kwargs: Any) -> None:
              \"""[see superclass]\"""

    :param match: the placeholder; members whose docstring equals it get the
        docstring of the first base class in method resolution order that
        defines the same member
    :return: the decorator
    """

    def _decorate(cls: T_Type) -> T_Type:
        if not isinstance(cls, type):
            raise TypeError(
                f"@{inheritdoc.__name__} can only decorate classes, "
                f"not a {type(cls).__name__}"
            )

        n_replaced = 0
        for name, member in vars(cls).items():
            if _docstring(member) != match:
                continue
            for base in cls.__mro__[1:]:
                if name in vars(base):
                    _replace_docstring(member, _docstring(vars(base)[name]))
                    n_replaced += 1
                    break

        if not n_replaced:
            log.warning(f"@inheritdoc: no docstring {match!r} in {cls.__name__}")
        return cls

    return _decorate


__tracker.validate()


def _docstring(member: Any) -> Optional[str]:
    # unwrap class methods, static methods and properties
    for attr in ("__func__", "fget"):
        inner = getattr(member, attr, None)
        if inner is not None:
            return inner.__doc__
    return getattr(member, "__doc__", None)


def _replace_docstring(member: Any, docstring: Optional[str]) -> None:
    for attr in ("__func__", "fget"):
        inner = getattr(member, attr, None)
        if inner is not None:
            inner.__doc__ = docstring
            return
    member.__doc__ = docstring
