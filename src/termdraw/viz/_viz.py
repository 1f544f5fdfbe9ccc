"""
Base classes for drawers and drawing styles.

Drawers follow a model/view/controller design: a :class:`.Drawer` (the
controller) walks through the data (the model) and makes low-level drawing calls
to its :class:`.DrawingStyle` (the view), which decides what the output looks like,
e.g., plain text or a `matplotlib` chart.
"""

import logging
from abc import ABCMeta, abstractmethod
from enum import Enum
from multiprocessing import Lock
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Optional,
    Type,
    TypeVar,
    Union,
)

from ..api import AllTracker

log = logging.getLogger(__name__)

#
# Exported names
#

__all__ = ["DrawingStyle", "Drawer"]

#
# Type variables
#

T_Model = TypeVar("T_Model")
T_Style = TypeVar("T_Style", bound="DrawingStyle")


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class _Status(Enum):
    IDLE = 0
    STARTED = 1
    FINALIZED = 2


class DrawingStyle(metaclass=ABCMeta):
    """
    Base class for the drawing styles of a :class:`.Drawer`.

    A style receives one :meth:`.start_drawing` call, any number of
    drawer-specific drawing calls, and one :meth:`.finalize_drawing` call per
    drawing.
    Styles keep state between these calls, so a style instance renders one drawing
    at a time.

    For example, a :class:`.LineChartDrawer` uses a :class:`.LineChartStyle`, which
    is implemented by :class:`.LineChartReportStyle` for text output and by
    :class:`.LineChartMatplotStyle` for `matplotlib` output.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = Lock()
        self._status = _Status.IDLE

    @classmethod
    def get_named_styles(cls: Type[T_Style]) -> Dict[str, Callable[..., T_Style]]:
        """
        Get the named styles this class provides.

        :return: a mapping of style names to factories creating the style
        """
        return {cls.get_default_style_name(): cls}

    @classmethod
    @abstractmethod
    def get_default_style_name(cls) -> str:
        """
        Get the name under which this style class can be requested by its default
        parameters, e.g., ``"text"`` or ``"matplot"``.

        :return: the style name
        """

    def start_drawing(self, *, title: str, **kwargs: Any) -> None:
        """
        Start a new drawing.

        Overriding methods must call ``super().start_drawing()`` before doing their
        own initialization.

        :param title: the title of the drawing
        :param kwargs: additional drawer-specific arguments, as returned by
            :meth:`.Drawer.get_style_kwargs`
        """
        self._status = _Status.STARTED

    def finalize_drawing(self, **kwargs: Any) -> None:
        """
        Complete the current drawing.

        Overriding methods must call ``super().finalize_drawing()`` after doing
        their own finalization.

        :param kwargs: additional drawer-specific arguments, as returned by
            :meth:`.Drawer.get_style_kwargs`
        """
        self._status = _Status.FINALIZED


class Drawer(Generic[T_Model, T_Style], metaclass=ABCMeta):
    """
    Base class for drawers, rendering data objects of one type using a
    :class:`.DrawingStyle`.
    """

    #: The style this drawer renders with.
    style: T_Style

    #: The name of the style used if none is specified.
    DEFAULT_STYLE = "text"

    def __init__(self, style: Optional[Union[T_Style, str]] = None) -> None:
        """
        :param style: the style to render with, as a :class:`.DrawingStyle` or as
            the name of a named style, e.g., ``"text"`` or ``"matplot"``
            (default: :attr:`.DEFAULT_STYLE`)
        """
        if style is None:
            style = self.DEFAULT_STYLE

        if isinstance(style, str):
            named_styles = self.get_named_styles()
            if style not in named_styles:
                raise KeyError(
                    f"unknown named style: {style}; "
                    f"expected one of {sorted(named_styles)}"
                )
            self.style = named_styles[style]()
        elif isinstance(style, DrawingStyle):
            self.style = style
        else:
            raise TypeError(
                "arg style expected to be a string, or an instance of class "
                f"{DrawingStyle.__name__}"
            )

    @classmethod
    def get_named_styles(cls) -> Dict[str, Callable[..., T_Style]]:
        """
        Get the named styles accepted by this drawer's initializer.

        :return: a mapping of style names to factories creating the style
        """
        named_styles: Dict[str, Callable[..., T_Style]] = {}
        for style_class in cls.get_style_classes():
            named_styles.update(style_class.get_named_styles())
        return named_styles

    @classmethod
    @abstractmethod
    def get_style_classes(cls) -> Iterable[Type[T_Style]]:
        """
        Get the style classes this drawer can render with.

        :return: the style classes
        """

    def draw(self, data: T_Model, *, title: str) -> None:
        """
        Render the given data.

        While holding the style's lock, starts a drawing with the title and the
        arguments from :meth:`.get_style_kwargs`, draws the data with
        :meth:`._draw`, and finalizes the drawing with the same arguments.

        :param data: the data to render
        :param title: the title of the drawing
        """
        style = self.style

        # noinspection PyProtectedMember
        with style._lock:
            style_kwargs = self.get_style_kwargs(data)

            style._status = _Status.IDLE
            style.start_drawing(title=title, **style_kwargs)
            _check_status(style, _Status.STARTED, "start_drawing")

            self._draw(data)

            style.finalize_drawing(**style_kwargs)
            _check_status(style, _Status.FINALIZED, "finalize_drawing")

    def get_style_kwargs(self, data: T_Model) -> Dict[str, Any]:
        """
        Get the drawer-specific arguments to pass to the style's
        :meth:`~.DrawingStyle.start_drawing` and
        :meth:`~.DrawingStyle.finalize_drawing` methods.

        :param data: the data to render
        :return: the keyword arguments for the style
        """
        return {}

    @abstractmethod
    def _draw(self, data: T_Model) -> None:
        # make the drawing calls to this drawer's style
        pass


__tracker.validate()


def _check_status(style: DrawingStyle, expected: _Status, method: str) -> None:
    # noinspection PyProtectedMember
    if style._status is not expected:
        raise AssertionError(
            f"{type(style).__name__}.{method}() did not call "
            f"DrawingStyle.{method}() of its superclass"
        )
