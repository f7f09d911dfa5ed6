"""Tests for filters/module.py."""

import types

import pytest

from localekeys.infrastructure.filters.module import exclude_packages, include_modules, include_packages


def _module(name: str) -> types.ModuleType:
    return types.ModuleType(name)


class TestIncludePackages:
    """Tests for include_packages filter."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("myapp", True),
            ("myapp.views", True),
            ("myapp.views.forms", True),
            ("myapp_extra", False),
            ("other", False),
        ],
    )
    def test_package_and_submodules(self, name: str, expected: bool) -> None:
        """Package name matches itself and its submodules only."""
        assert include_packages("myapp")(_module(name)) is expected

    def test_several_packages(self) -> None:
        """Any listed package matches."""
        flt = include_packages("myapp", "shared")

        assert flt(_module("shared.texts"))

    def test_no_packages(self) -> None:
        """No packages matches nothing."""
        assert not include_packages()(_module("myapp"))


class TestExcludePackages:
    """Tests for exclude_packages filter."""

    def test_excludes_package_tree(self) -> None:
        """Excluded package and submodules are rejected."""
        flt = exclude_packages("tests")

        assert not flt(_module("tests"))
        assert not flt(_module("tests.unit"))
        assert flt(_module("testsuite"))


class TestIncludeModules:
    """Tests for include_modules filter."""

    def test_glob(self) -> None:
        """Glob patterns are case-sensitive."""
        flt = include_modules("myapp.*.resources")

        assert flt(_module("myapp.ui.resources"))
        assert not flt(_module("myapp.ui.Resources"))
        assert not flt(_module("myapp.resources"))
