"""
Sound button for RingerTile.

This module defines `SoundButton`, the glue between the `ModeCycler` and the host:
it reads the external ringer state on setup and on every change notification,
commits the cycler's intents to the audio, vibration and settings services when
clicked, and reports the resulting icon to the view through Qt signals.
"""

import logging
from typing import Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from ringertile import constants
from ringertile.core.cycler import DisplayState, ModeCycler, RingerIntent
from ringertile.core.order import ParseError
from ringertile.core.services import HardwareAudioService, SettingsStore, VibrationService
from ringertile.core.system_events import SystemEventHandler


class SoundButton(QObject):
    """
    Cycles the ringer mode on click and keeps its icon in sync with the system.

    Signals:
        display_changed (str, bool): Icon name and enabled flag after every update.
        sound_settings_requested (str): Emitted on long click with the settings action to open.
    """

    display_changed = pyqtSignal(str, bool)
    sound_settings_requested = pyqtSignal(str)

    def __init__(self,
                 audio_service: HardwareAudioService,
                 vibration_service: VibrationService,
                 settings_store: SettingsStore,
                 cycler: Optional[ModeCycler] = None,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger("RingerTile.SoundButton")
        self.audio_service = audio_service
        self.vibration_service = vibration_service
        self.settings_store = settings_store
        self.cycler = cycler or ModeCycler()
        self.notifier: Optional[SystemEventHandler] = None

        self._display: Optional[DisplayState] = None
        self._committing: bool = False

    @property
    def icon(self) -> Optional[str]:
        return self._display.icon if self._display else None

    @property
    def enabled(self) -> bool:
        return bool(self._display and self._display.enabled)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Loads the stored order, reads the current ringer state and publishes the icon."""
        self._refresh_order()
        self.cycler.initialize(self.cycler.order, *self._read_external_state())
        self._publish_display()
        self.logger.info("Sound button set up with order %s.", self.cycler.order)

    def connect_to(self, notifier: SystemEventHandler) -> None:
        """Subscribes to ringer and settings change notifications."""
        if self.notifier is not None:
            self.disconnect_from(self.notifier)
        notifier.ringer_mode_changed.connect(self.on_ringer_mode_changed)
        notifier.setting_changed.connect(self.on_setting_changed)
        self.notifier = notifier
        self.logger.debug("Connected to system event handler.")

    def disconnect_from(self, notifier: SystemEventHandler) -> None:
        try:
            notifier.ringer_mode_changed.disconnect(self.on_ringer_mode_changed)
            notifier.setting_changed.disconnect(self.on_setting_changed)
        except (TypeError, RuntimeError):
            pass
        if self.notifier is notifier:
            self.notifier = None

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def handle_click(self) -> None:
        """Advances to the next selectable mode and applies it."""
        intent = self.cycler.advance()
        try:
            self._commit(intent)
        except Exception as e:
            self.logger.error("Failed to apply ringer intent %s: %s", intent, e, exc_info=True)
            self._resync()
        self._publish_display()

    def handle_long_click(self) -> bool:
        """Requests the system sound settings screen."""
        self.logger.debug("Long click detected. Requesting sound settings.")
        self.sound_settings_requested.emit(constants.ringer.actions.SOUND_SETTINGS_ACTION)
        return True

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------

    def on_ringer_mode_changed(self, mode: int) -> None:
        self.logger.debug("Ringer mode broadcast received: %s", mode)
        self._resync()
        self._publish_display()

    def on_setting_changed(self, key: str) -> None:
        keys = constants.config.keys
        if key == keys.SELECTABLE_ORDER:
            self._refresh_order()
        elif key == keys.VIBRATE_WHEN_RINGING:
            if self._committing:
                # Echo of our own write; the cycler already holds the target mode.
                return
        else:
            return
        self._resync()
        self._publish_display()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self, intent: RingerIntent) -> None:
        self._committing = True
        try:
            if intent.vibrate_when_ringing:
                self.vibration_service.vibrate(constants.ringer.actions.VIBRATE_DURATION_MS)
            self.settings_store.put_int(constants.config.keys.VIBRATE_WHEN_RINGING,
                                        1 if intent.vibrate_when_ringing else 0)
            self.audio_service.set_ringer_mode(intent.ringer_mode)
        finally:
            self._committing = False
        self.logger.info("Ringer mode set to %s (vibrate when ringing: %s).",
                         intent.ringer_mode, intent.vibrate_when_ringing)

    def _refresh_order(self) -> None:
        raw = self.settings_store.get_string(constants.config.keys.SELECTABLE_ORDER)
        try:
            self.cycler.refresh_order(raw)
        except ParseError as e:
            self.logger.warning("Ignoring stored mode order: %s. Keeping %s.", e, self.cycler.order)

    def _read_external_state(self) -> Tuple[int, bool]:
        ringer_mode = self.audio_service.get_ringer_mode()
        vibrate = self.settings_store.get_int(
            constants.config.keys.VIBRATE_WHEN_RINGING,
            constants.config.defaults.DEFAULT_VIBRATE_WHEN_RINGING) == 1
        return ringer_mode, vibrate

    def _resync(self) -> None:
        self.cycler.observe_external_change(*self._read_external_state())

    def _publish_display(self) -> None:
        self._display = self.cycler.current_display()
        self.display_changed.emit(self._display.icon, self._display.enabled)
