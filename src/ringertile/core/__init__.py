"""
Core submodule for RingerTile.

Contains the mode catalog, the mode cycler, and the Qt glue that connects them
to the host's audio, vibration and settings services.
"""

from ringertile.core.cycler import ModeCycler
from ringertile.core.order import ParseError
from ringertile.core.sound_button import SoundButton
from ringertile.core.system_events import SystemEventHandler

__all__ = [
    "ModeCycler",
    "ParseError",
    "SoundButton",
    "SystemEventHandler",
]
