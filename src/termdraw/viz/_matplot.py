"""
Matplotlib styles for the ``termdraw`` visualization framework.
"""

import logging
from abc import ABCMeta
from typing import Any, Iterable, List, Optional, Union

import matplotlib.pyplot as plt
from matplotlib import rcParams
from matplotlib.axes import Axes

from ..api import AllTracker, to_list
from ._viz import DrawingStyle

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["MatplotStyle"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class MatplotStyle(DrawingStyle, metaclass=ABCMeta):
    """
    Base class of drawing styles rendering to `matplotlib` axes.

    Text is set in a monospaced font while drawing, so that charts look alike in
    text and in `matplotlib` output; the previous font is restored when the
    drawing is finalized.
    """

    #: Monospaced fonts to try before the ones configured in ``font.monospace``.
    MONOSPACE_FONTS = (
        "Menlo",
        "Monaco",
        "Lucida Console",
        "DejaVu Sans Mono",
        "monospace",
    )

    #: The fonts to draw with, in descending order of preference.
    font_family: List[str]

    def __init__(
        self,
        *,
        ax: Optional[Axes] = None,
        font_family: Optional[Union[str, Iterable[str]]] = None,
    ) -> None:
        """
        :param ax: the axes to draw on (default: the current axes of the current
            figure, created on first use)
        :param font_family: one or more fonts to draw with, in descending order of
            preference; monospaced fonts are used if none of them is available
        """
        super().__init__()

        fallback = [*MatplotStyle.MONOSPACE_FONTS, *rcParams["font.monospace"]]
        self.font_family = [
            *to_list(
                font_family, element_type=str, optional=True, arg_name="font_family"
            ),
            *fallback,
        ]
        self._ax = ax
        self._saved_font_family: Optional[List[str]] = None

    @classmethod
    def get_default_style_name(cls) -> str:
        """
        The name of the matplotlib style: ``"matplot"``.
        """
        return "matplot"

    @property
    def ax(self) -> Axes:
        """
        The axes this style draws on.
        """
        if self._ax is None:
            self._ax = plt.gca()
        return self._ax

    def start_drawing(self, *, title: str, **kwargs: Any) -> None:
        """
        Switch to this style's fonts, and set the title of the axes.

        :param title: the title of the drawing
        :param kwargs: additional drawer-specific arguments
        """
        super().start_drawing(title=title, **kwargs)

        self._saved_font_family = rcParams["font.family"]
        rcParams["font.family"] = self.font_family
        self.ax.set_title(title)

    def finalize_drawing(self, **kwargs: Any) -> None:
        """
        Restore the fonts in use before the drawing was started.

        :param kwargs: additional drawer-specific arguments
        """
        try:
            if self._saved_font_family is not None:
                rcParams["font.family"] = self._saved_font_family
                self._saved_font_family = None
        finally:
            super().finalize_drawing(**kwargs)


__tracker.validate()
