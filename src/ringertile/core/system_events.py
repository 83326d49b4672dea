"""
System Event Handler Module.

This module centralizes the change notifications the sound tile reacts to: ringer
mode broadcasts from the audio service and changes to the persisted settings. Hosts
forward their platform events here and the handler re-emits them as Qt signals.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal


class SystemEventHandler(QObject):
    """
    Dispatches ringer and settings change notifications.

    Signals:
        ringer_mode_changed (int): Emitted when the hardware ringer mode changes.
        setting_changed (str): Emitted with the key of a persisted setting that changed.
        events_paused (bool): Emitted when event dispatch is paused/resumed.
    """

    ringer_mode_changed = pyqtSignal(int)
    setting_changed = pyqtSignal(str)
    events_paused = pyqtSignal(bool)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.logger = logging.getLogger("RingerTile.SystemEventHandler")
        self._is_paused = False

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    def notify_ringer_mode_changed(self, mode: int) -> None:
        """Forwards a ringer mode broadcast."""
        if self._is_paused:
            self.logger.debug("Paused; dropping ringer mode change (%s).", mode)
            return
        self.ringer_mode_changed.emit(int(mode))

    def notify_setting_changed(self, key: str) -> None:
        """Forwards a change to a persisted setting."""
        if self._is_paused:
            self.logger.debug("Paused; dropping setting change (%s).", key)
            return
        self.setting_changed.emit(key)

    def pause(self) -> None:
        """Pauses event processing."""
        self._is_paused = True
        self.events_paused.emit(True)

    def resume(self) -> None:
        """Resumes event processing."""
        self._is_paused = False
        self.events_paused.emit(False)
