"""
Category filter for summary reports.

A caller requests summary sections by name. A section is enabled when its
name was requested exactly, or when ``all`` was requested. Matching is
case-sensitive with no prefix or glob expansion. Names this module does not
recognise are kept but never reported as errors; they simply enable nothing.
"""

from collections.abc import Iterable

from renderstats.schema import Category


def _category_name(name: "Category | str") -> str:
    if isinstance(name, Category):
        return name.value
    return name


class CategoryFilter:
    """
    Decides whether a named statistic category is enabled.

    Usage:
        categories = CategoryFilter(["geometry", "bounding_box"])
        categories.is_enabled(Category.GEOMETRY)  # True
        categories.is_enabled("camera")           # False
    """

    def __init__(self, requested: Iterable["Category | str"] = ()) -> None:
        self._requested = tuple(_category_name(name) for name in requested)
        self._all = Category.ALL.value in self._requested

    @property
    def requested(self) -> tuple[str, ...]:
        """The requested names, in request order."""
        return self._requested

    def is_enabled(self, name: "Category | str") -> bool:
        """Return True if ``name`` was requested or ``all`` was."""
        return self._all or _category_name(name) in self._requested

    def unknown(self) -> list[str]:
        """Requested names that match no known category."""
        known = {category.value for category in Category}
        return [name for name in self._requested if name not in known]

    def __repr__(self) -> str:
        return f"CategoryFilter({list(self._requested)!r})"
