"""
Unit tests for the mode catalog and its equality rule.
"""

import pytest

from ringertile.core.modes import (
    CATALOG, CatalogIndex, Mode, RingerMode,
    find_catalog_index, modes_equivalent, resolve_catalog_index,
)


def test_catalog_layout():
    """The catalog holds the four modes in fixed order."""
    assert CATALOG[CatalogIndex.SILENT] == Mode(RingerMode.SILENT, False)
    assert CATALOG[CatalogIndex.VIBRATE] == Mode(RingerMode.VIBRATE, True)
    assert CATALOG[CatalogIndex.NORMAL] == Mode(RingerMode.NORMAL, False)
    assert CATALOG[CatalogIndex.NORMAL_VIBRATE] == Mode(RingerMode.NORMAL, True)


@pytest.mark.parametrize("ringer_mode", [RingerMode.SILENT, RingerMode.VIBRATE])
def test_silent_and_vibrate_ignore_the_flag(ringer_mode):
    assert modes_equivalent(Mode(ringer_mode, True), Mode(ringer_mode, False))


def test_normal_modes_compare_both_fields():
    assert not modes_equivalent(Mode(RingerMode.NORMAL, True), Mode(RingerMode.NORMAL, False))
    assert modes_equivalent(Mode(RingerMode.NORMAL, True), Mode(RingerMode.NORMAL, True))
    assert not modes_equivalent(Mode(RingerMode.SILENT, False), Mode(RingerMode.VIBRATE, False))


@pytest.mark.parametrize("ringer_mode, vibrate, expected", [
    (RingerMode.SILENT, False, CatalogIndex.SILENT),
    (RingerMode.SILENT, True, CatalogIndex.SILENT),
    (RingerMode.VIBRATE, False, CatalogIndex.VIBRATE),
    (RingerMode.VIBRATE, True, CatalogIndex.VIBRATE),
    (RingerMode.NORMAL, False, CatalogIndex.NORMAL),
    (RingerMode.NORMAL, True, CatalogIndex.NORMAL_VIBRATE),
])
def test_find_catalog_index(ringer_mode, vibrate, expected):
    assert find_catalog_index(ringer_mode, vibrate) == expected


def test_find_catalog_index_accepts_raw_ints():
    """Hardware readings arrive as plain integers."""
    assert find_catalog_index(2, True) == CatalogIndex.NORMAL_VIBRATE


def test_unknown_ringer_mode_falls_back_to_silent():
    assert find_catalog_index(42, True) == CatalogIndex.SILENT
    assert find_catalog_index(-1, False) == CatalogIndex.SILENT


@pytest.mark.parametrize("index, expected", [(0, 0), (3, 3), (4, 0), (7, 0), (-1, 0)])
def test_resolve_catalog_index_clamps(index, expected):
    assert resolve_catalog_index(index) == expected
