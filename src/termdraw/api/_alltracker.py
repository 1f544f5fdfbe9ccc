"""
Tracking of public module definitions, for :mod:`termdraw.api`.
"""

import logging
import re
from typing import Any, Dict, List, Optional

log = logging.getLogger(__name__)

__all__ = ["AllTracker", "public_module_prefix"]


class AllTracker:
    """
    Checks that a module's ``__all__`` lists exactly the public items the module
    defines.

    Each private module of ``termdraw`` creates a tracker right after its imports,
    defines its items, and calls :meth:`.validate` at the end.
    The public package then imports the module's items with
    ``from ._module import *``.

    Names imported before the tracker was created, and names starting with an
    underscore, are not tracked.
    Upon validation, each exported item is tagged with the name of the public
    module it is exported from, in attribute ``__publicmodule__``.
    """

    #: The name of the public module exporting the tracked items.
    public_module: str

    #: If ``True``, constants may be exported along with classes and functions.
    allow_global_constants: bool

    #: If ``True``, items defined in other modules may be re-exported.
    allow_imported_definitions: bool

    def __init__(
        self,
        globals_: Dict[str, Any],
        *,
        public_module: Optional[str] = None,
        allow_global_constants: bool = False,
        allow_imported_definitions: bool = False,
    ) -> None:
        """
        :param globals_: the global namespace of the tracked module, as returned
            by :func:`globals`
        :param public_module: the name of the public module exporting the tracked
            items (default: the module name up to its first private component)
        :param allow_global_constants: if ``True``, constants may be exported
        :param allow_imported_definitions: if ``True``, items defined in other
            modules may be re-exported
        """
        if "__name__" not in globals_:
            raise ValueError("arg globals_ does not define module name in __name__")

        self._globals = globals_
        self._module: str = globals_["__name__"]
        self._untracked = frozenset(globals_)
        self.public_module = public_module or public_module_prefix(self._module)
        self.allow_global_constants = allow_global_constants
        self.allow_imported_definitions = allow_imported_definitions
        globals_["__publicmodule__"] = self.public_module

    def get_tracked(self) -> List[str]:
        """
        Get the names of all public items defined since this tracker was created.

        :return: the names, in alphabetical order
        """
        return sorted(
            name
            for name in self._globals
            if not name.startswith("_") and name not in self._untracked
        )

    def validate(self) -> None:
        """
        Check ``__all__`` against the tracked items, and tag all exported items
        with their public module.

        :raise AssertionError: ``__all__`` does not list exactly the tracked items,
            or an item may not be exported
        """
        tracked = self.get_tracked()
        if set(self._globals.get("__all__", ())) != set(tracked):
            raise AssertionError(
                f"missing or unexpected all declaration, expected:\n__all__ = {tracked}"
            )

        for name in tracked:
            item = self._globals[name]
            item_module: Optional[str] = getattr(item, "__module__", None)

            if item_module is None:
                if not self.allow_global_constants:
                    raise AssertionError(
                        f"exporting a global constant is not permitted: {item!r}"
                    )
                continue

            if item_module != self._module and not self.allow_imported_definitions:
                raise AssertionError(
                    f"{getattr(item, '__qualname__', name)} is exported by module "
                    f"{self._module} but defined in module {item_module}"
                )

            try:
                item.__publicmodule__ = self.public_module
            except (AttributeError, TypeError):
                # built-in types and slotted objects cannot be tagged
                pass


# leading components of a module path that do not start with an underscore
_RE_PUBLIC_PREFIX = re.compile(r"[a-zA-Z]\w*(?:\.[a-zA-Z]\w*)*")


def public_module_prefix(module_name: str) -> str:
    """
    Get the public part of a module name.

    The public part ends before the first component starting with an underscore;
    e.g., the public part of ``termdraw.text._box`` is ``termdraw.text``.

    :param module_name: the full module name
    :return: the public part of the module name
    :raise ValueError: the module name starts with a private component
    """
    match = _RE_PUBLIC_PREFIX.match(module_name)
    if match is None:
        raise ValueError(f"cannot infer public module path from module {module_name}")
    return match.group()
