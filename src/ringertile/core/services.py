"""
Collaborator contracts for RingerTile.

The tile reads and writes ringer state through services owned by the host platform.
These protocols describe the calls it makes; any object with matching methods can
be passed in.
"""

from typing import Optional, Protocol


class HardwareAudioService(Protocol):
    """Platform audio service owning the hardware ringer mode."""

    def get_ringer_mode(self) -> int: ...

    def set_ringer_mode(self, mode: int) -> None: ...


class VibrationService(Protocol):
    """Fire-and-forget vibration requests."""

    def vibrate(self, duration_ms: int) -> None: ...


class SettingsStore(Protocol):
    """Persisted key-value settings shared with the system settings screens."""

    def get_int(self, key: str, default: int = 0) -> int: ...

    def get_string(self, key: str) -> Optional[str]: ...

    def put_int(self, key: str, value: int) -> None: ...

    def put_string(self, key: str, value: Optional[str]) -> None: ...
