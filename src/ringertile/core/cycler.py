"""
Mode cycler for RingerTile.

This module defines `ModeCycler`, the state machine behind the sound tile. It tracks
which catalog mode the outside world currently reflects and where that mode sits in
the user's selectable order, and computes the next mode to switch to on a click.

The cycler never touches hardware or storage itself: callers feed it readings and
commit the `RingerIntent` it returns.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from ringertile import constants
from ringertile.core.modes import CATALOG, Mode, find_catalog_index, resolve_catalog_index
from ringertile.core.order import Order, parse_order


class DisplayState(NamedTuple):
    """Icon name and enabled flag for the current mode."""
    icon: str
    enabled: bool


class RingerIntent(NamedTuple):
    """External writes requested by an advance step."""
    ringer_mode: int
    vibrate_when_ringing: bool


@dataclass
class CyclerState:
    """
    Mutable position of the cycler.

    Attributes:
        current_catalog_index: Catalog index of the mode the external state reflects.
        current_order_position: Position of that mode within the order, or 0 when
            the mode is not part of the order.
    """
    current_catalog_index: int = 0
    current_order_position: int = 0


class ModeCycler:
    """
    Cycles through the selectable ringer modes and mirrors external ringer state.

    Events are expected one at a time; the cycler does no locking.

    Example:
        >>> from ringertile.core.modes import RingerMode
        >>> cycler = ModeCycler()
        >>> cycler.initialize((2, 3, 0, 1), RingerMode.NORMAL, False)
        >>> cycler.advance()
        RingerIntent(ringer_mode=<RingerMode.NORMAL: 2>, vibrate_when_ringing=True)
    """

    def __init__(self, order: Optional[Order] = None) -> None:
        self.logger = logging.getLogger("RingerTile.ModeCycler")
        self._order: Order = tuple(order) if order is not None else constants.ringer.modes.DEFAULT_ORDER
        self.state = CyclerState()

    @property
    def order(self) -> Order:
        return self._order

    @property
    def current_mode(self) -> Mode:
        return CATALOG[self.state.current_catalog_index]

    def initialize(self, order: Order, hardware_mode: int, vibrate_when_ringing: bool) -> None:
        """Sets the order and synchronizes with the current external state."""
        self._order = tuple(order)
        self.observe_external_change(hardware_mode, vibrate_when_ringing)
        self.logger.debug("Initialized with order %s at catalog index %d (position %d).",
                          self._order, self.state.current_catalog_index,
                          self.state.current_order_position)

    def refresh_order(self, raw_order: Optional[str]) -> Order:
        """
        Re-reads the selectable order from its stored text.

        Raises:
            ParseError: If the text is malformed. The previous order is kept.
        """
        self._order = parse_order(raw_order)
        self.logger.debug("Order refreshed: %s", self._order)
        return self._order

    def observe_external_change(self, hardware_mode: int, vibrate_when_ringing: bool) -> None:
        """Recomputes the cycler state from the hardware ringer mode and vibrate flag."""
        self.logger.debug("Observed ringer_mode=%r vibrate_when_ringing=%r",
                          hardware_mode, vibrate_when_ringing)
        index = find_catalog_index(hardware_mode, vibrate_when_ringing)
        self.state.current_catalog_index = index
        self.state.current_order_position = self._position_of(index)

    def current_display(self) -> DisplayState:
        index = self.state.current_catalog_index
        display = constants.ringer.display
        return DisplayState(display.ICONS[index], display.ENABLED[index])

    def advance(self) -> RingerIntent:
        """
        Moves to the next mode in the order and returns the writes needed to apply it.

        The state is updated optimistically; a later `observe_external_change` corrects
        it if the writes do not take effect.
        """
        order = self._order or (constants.ringer.modes.FALLBACK_INDEX,)
        position = (self.state.current_order_position + 1) % len(order)
        index = resolve_catalog_index(order[position])

        self.state.current_order_position = position
        self.state.current_catalog_index = index

        target = CATALOG[index]
        self.logger.debug("Advancing to order position %d (catalog index %d).", position, index)
        return RingerIntent(target.ringer_mode, target.vibrate_when_ringing)

    def _position_of(self, index: int) -> int:
        for position, entry in enumerate(self._order):
            if entry == index:
                return position
        return 0
