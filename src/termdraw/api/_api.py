"""
Core implementation of :mod:`termdraw.api`.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from ._alltracker import AllTracker

log = logging.getLogger(__name__)

__all__ = ["to_list", "validate_element_types"]

#
# Type variables
#

T = TypeVar("T")
T_Iterable = TypeVar("T_Iterable", bound=Iterable[Any])

#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Functions
#


def to_list(
    values: Union[Iterable[T], T, None],
    *,
    element_type: Optional[Union[Type[T], Tuple[Type[T], ...]]] = None,
    optional: bool = False,
    arg_name: Optional[str] = None,
) -> List[T]:
    """
    Convert one or more values to a new list.

    Strings are single values; any other iterable contributes all of its
    elements.

    :param values: a single value, or an iterable of values
    :param element_type: the type, or a tuple of alternative types, all elements
        must be instances of (optional)
    :param optional: if ``True``, convert ``None`` to an empty list
    :param arg_name: the name of the argument the values were passed as, for
        error messages
    :return: the values as a list
    :raise TypeError: an element is not an instance of the element type
    """
    if values is None and optional:
        return []

    if isinstance(values, Iterable) and not isinstance(values, (str, bytes)):
        elements: List[T] = list(values)
    else:
        elements = [values]

    if element_type is not None:
        validate_element_types(
            elements,
            expected_type=element_type,
            name=None if arg_name is None else f"arg {arg_name}",
        )

    return elements


def validate_element_types(
    iterable: T_Iterable,
    *,
    expected_type: Union[type, Tuple[type, ...]],
    name: Optional[str] = None,
) -> T_Iterable:
    """
    Check that all elements of an iterable are instances of the expected type.

    :param iterable: the elements to check; must not be a string
    :param expected_type: the type, or a tuple of alternative types
    :param name: how to refer to the iterable in error messages, e.g.,
        ``"arg colors"`` (optional)
    :return: arg ``iterable``, unchanged
    :raise TypeError: the iterable is a string, or an element is not an instance
        of the expected type
    """
    subject = name or "iterable"

    if isinstance(iterable, (str, bytes)):
        raise TypeError(f"{subject} must not be a string or bytes instance")

    for element in iterable:
        if not isinstance(element, expected_type):
            raise TypeError(
                f"{subject} requires instances of {_type_names(expected_type)} "
                f"but got: {type(element).__name__}"
            )

    return iterable


__tracker.validate()


def _type_names(expected_type: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(expected_type, type):
        return expected_type.__name__
    else:
        return "one of {" + ", ".join(t.__name__ for t in expected_type) + "}"
