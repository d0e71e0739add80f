from __future__ import annotations

import json

import pytest

from lib_log_tag.domain.callsite import CallSite, normalize_owner, owner_identity


class Outer:
    class Inner:
        class Deepest:
            pass


def module_function() -> None:
    return None


def test_simple_name_is_last_dotted_component() -> None:
    assert CallSite("pkg.mod.Outer", "run", 1, "mod.py").simple_name == "Outer"
    assert CallSite("standalone", "run", 1, "standalone.py").simple_name == "standalone"


def test_call_site_is_immutable() -> None:
    site = CallSite("pkg.mod", "run", 1, "mod.py")
    with pytest.raises(AttributeError):
        site.line_number = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    "qualname, expected",
    [
        ("Outer.method", "pkg.Outer"),
        ("Outer.Inner.method", "pkg.Outer"),
        ("Outer.method.<locals>.helper", "pkg.Outer"),
        ("module_function", "pkg"),
        ("module_function.<locals>.Local.method", "pkg"),
        ("<module>", "pkg"),
    ],
)
def test_normalize_owner_uses_outermost_class(qualname: str, expected: str) -> None:
    namespace = {"Outer": Outer, "module_function": module_function}
    assert normalize_owner("pkg", qualname, namespace) == expected


def test_owner_identity_maps_nested_classes_to_outer_class() -> None:
    assert owner_identity(Outer) == f"{__name__}.Outer"
    assert owner_identity(Outer.Inner) == f"{__name__}.Outer"
    assert owner_identity(Outer.Inner.Deepest) == f"{__name__}.Outer"


def test_owner_identity_accepts_modules_and_strings() -> None:
    assert owner_identity(json) == "json"
    assert owner_identity("  app.Foo ") == "app.Foo"


@pytest.mark.parametrize("unknown", [None, "", "   ", 42, object()])
def test_owner_identity_returns_none_for_unmappable_owners(unknown: object) -> None:
    assert owner_identity(unknown) is None
