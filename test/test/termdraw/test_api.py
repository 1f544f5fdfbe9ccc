"""
Basic test cases for the `termdraw.api` module
"""
from typing import Any, Dict

import pytest

from termdraw.api import (
    AllTracker,
    inheritdoc,
    public_module_prefix,
    to_list,
    validate_element_types,
)


def test_list_conversion() -> None:
    assert to_list(1) == [1]
    assert to_list((1, 2)) == [1, 2]
    assert to_list("ab") == ["ab"]
    assert to_list(iter([1, 2])) == [1, 2]

    my_list = [1, 2]
    assert to_list(my_list) == my_list

    assert to_list(None, optional=True) == []
    assert to_list(None) == [None]

    with pytest.raises(TypeError, match=r"^arg xyz requires instances of str"):
        to_list(["a", 1], element_type=str, arg_name="xyz")


def test_type_validation() -> None:
    validate_element_types([1, 2, 3], expected_type=int)
    with pytest.raises(TypeError, match=r"^xyz "):
        validate_element_types(iter([1, 2, 3]), expected_type=str, name="xyz")

    with pytest.raises(
        TypeError, match=r"^xyz must not be a string or bytes instance$"
    ):
        validate_element_types("abc", expected_type=str, name="xyz")

    with pytest.raises(
        TypeError,
        match=r"^arg colors requires instances of one of \{int, float\} but got: str$",
    ):
        validate_element_types(
            [1, "2"], expected_type=(int, float), name="arg colors"
        )


def test_all_tracker() -> None:
    class A:
        pass

    class _B:
        pass

    mock_globals: Dict[str, Any] = dict(__all__=["A"], __name__=__name__)
    tracker = AllTracker(mock_globals)
    mock_globals.update(dict(A=A, _B=_B))

    tracker.validate()
    assert tracker.get_tracked() == ["A"]
    assert A.__publicmodule__ == tracker.public_module  # type: ignore

    # public items missing from __all__
    mock_globals = dict(__all__=[], __name__=__name__)
    tracker = AllTracker(mock_globals)
    mock_globals.update(dict(A=A))

    with pytest.raises(AssertionError, match="missing or unexpected all"):
        tracker.validate()

    # constants are only exported if permitted
    mock_globals = dict(__all__=["CONST"], __name__=__name__)
    tracker = AllTracker(mock_globals)
    mock_globals.update(dict(CONST=1))

    with pytest.raises(AssertionError, match="global constant"):
        tracker.validate()

    mock_globals = dict(__all__=["CONST"], __name__=__name__)
    tracker = AllTracker(mock_globals, allow_global_constants=True)
    mock_globals.update(dict(CONST=1))
    tracker.validate()

    # items defined elsewhere are only exported if permitted
    mock_globals = dict(__all__=["Any"], __name__=__name__)
    tracker = AllTracker(mock_globals)
    mock_globals.update(dict(Any=pytest.MonkeyPatch))

    with pytest.raises(AssertionError, match="is exported by module"):
        tracker.validate()


def test_public_module_prefix() -> None:
    assert public_module_prefix("termdraw.text._box") == "termdraw.text"
    assert public_module_prefix("termdraw.viz.chart.base._style") == (
        "termdraw.viz.chart.base"
    )
    assert public_module_prefix("termdraw.viz") == "termdraw.viz"

    with pytest.raises(ValueError):
        public_module_prefix("_private.module")


def test_inheritdoc() -> None:
    class _Base:
        def f(self) -> None:
            """Base docstring."""

    @inheritdoc(match="[see superclass]")
    class _Derived(_Base):
        def f(self) -> None:
            """[see superclass]"""

    assert _Derived.f.__doc__ == "Base docstring."
