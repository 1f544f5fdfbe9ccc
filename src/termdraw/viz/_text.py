"""
Text styles for the ``termdraw`` visualization framework.
"""

import logging
import sys
from abc import ABCMeta
from typing import Any, Optional, TextIO

from ..api import AllTracker
from ..terminal import bold
from ._viz import DrawingStyle

log = logging.getLogger(__name__)


#
# Exported names
#

__all__ = ["TextStyle"]


#
# Ensure all symbols introduced below are included in __all__
#

__tracker = AllTracker(globals())


#
# Classes
#


class TextStyle(DrawingStyle, metaclass=ABCMeta):
    """
    Base class of drawing styles writing plain text to a stream.

    Each drawing starts with a header line showing the title, centered between
    ``=`` characters, followed by a blank line; a blank line closes the drawing.
    """

    #: The stream the text is written to.
    out: TextIO

    #: The number of characters per line.
    width: int

    #: If ``True``, the header line is shown in bold.
    bold_title: bool

    #: The header shows at least this many ``=`` characters on either side.
    _MIN_RULE = 1

    def __init__(
        self,
        out: Optional[TextIO] = None,
        width: int = 80,
        *,
        bold_title: bool = False,
    ) -> None:
        """
        :param out: the stream to write to (default: :obj:`sys.stdout`)
        :param width: the number of characters per line (default: 80)
        :param bold_title: if ``True``, show the header line in bold using ANSI
            escape sequences (default: ``False``)
        """
        super().__init__()

        if width <= 0:
            raise ValueError(f"arg width={width} expected to be a positive integer")

        self.out = sys.stdout if out is None else out
        self.width = width
        self.bold_title = bold_title

    @classmethod
    def get_default_style_name(cls) -> str:
        """
        The name of the text style: ``"text"``.
        """
        return "text"

    def start_drawing(self, *, title: str, **kwargs: Any) -> None:
        """
        Write the header line.

        Titles too long for the header line are cut off.

        :param title: the title of the drawing
        :param kwargs: additional drawer-specific arguments
        """
        super().start_drawing(title=title, **kwargs)

        max_title_length = max(self.width - 2 * (self._MIN_RULE + 1), 0)
        header = f" {title[:max_title_length]} ".center(self.width, "=")
        if self.bold_title:
            header = bold(header)

        self.out.write(header + "\n\n")

    def finalize_drawing(self, **kwargs: Any) -> None:
        """
        Write the closing blank line.

        :param kwargs: additional drawer-specific arguments
        """
        try:
            self.out.write("\n")
        finally:
            super().finalize_drawing(**kwargs)


__tracker.validate()
