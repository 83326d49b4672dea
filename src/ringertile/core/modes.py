"""
Mode catalog for RingerTile.

This module defines the four audio-notification modes the tile can cycle through,
the hardware ringer modes they map onto, and the equality rule used to recognise
the current mode from external state.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from ringertile import constants

logger = logging.getLogger("RingerTile.Modes")


class RingerMode(IntEnum):
    """Hardware ringer mode, using the values reported by the platform audio service."""
    SILENT = 0
    VIBRATE = 1
    NORMAL = 2


class CatalogIndex(IntEnum):
    """Positions of the modes within CATALOG."""
    SILENT = 0
    VIBRATE = 1
    NORMAL = 2
    NORMAL_VIBRATE = 3


@dataclass(frozen=True)
class Mode:
    """
    A ringer mode paired with the vibrate-when-ringing flag.

    Attributes:
        ringer_mode: Hardware ringer mode. May hold an unrecognised raw value when
            the mode was built from a hardware reading.
        vibrate_when_ringing: Whether normal-mode notifications also vibrate.

    Catalog lookups go through `modes_equivalent`, not `==`.
    """
    ringer_mode: int
    vibrate_when_ringing: bool


CATALOG: Tuple[Mode, ...] = (
    Mode(RingerMode.SILENT, False),
    Mode(RingerMode.VIBRATE, True),
    Mode(RingerMode.NORMAL, False),
    Mode(RingerMode.NORMAL, True),
)


def modes_equivalent(a: Mode, b: Mode) -> bool:
    """
    Compares two modes the way the hardware sees them.

    The hardware has no independent vibrate setting while silent or vibrating, so
    two SILENT modes (or two VIBRATE modes) are equal whatever their flags. Any
    other pair must match on both fields.
    """
    if a.ringer_mode == RingerMode.SILENT and b.ringer_mode == RingerMode.SILENT:
        return True
    if a.ringer_mode == RingerMode.VIBRATE and b.ringer_mode == RingerMode.VIBRATE:
        return True
    return a.ringer_mode == b.ringer_mode and a.vibrate_when_ringing == b.vibrate_when_ringing


def find_catalog_index(ringer_mode: int, vibrate_when_ringing: bool) -> int:
    """
    Returns the catalog index of the mode matching the given external state.

    Falls back to the SILENT entry when nothing matches, e.g. for a ringer mode
    value this catalog does not know about.
    """
    observed = Mode(ringer_mode, bool(vibrate_when_ringing))
    for index, mode in enumerate(CATALOG):
        if modes_equivalent(mode, observed):
            return index
    logger.debug("No catalog mode matches ringer_mode=%r vibrate=%r; using fallback.",
                 ringer_mode, vibrate_when_ringing)
    return constants.ringer.modes.FALLBACK_INDEX


def resolve_catalog_index(index: int) -> int:
    """Clamps an index taken from a stored order to a valid catalog position."""
    if 0 <= index < len(CATALOG):
        return index
    logger.debug("Order entry %r is outside the catalog; using fallback.", index)
    return constants.ringer.modes.FALLBACK_INDEX
