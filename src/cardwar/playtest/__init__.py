"""Console presentation for watching War games."""

from cardwar.playtest.display import OutcomeRenderer, format_card
from cardwar.playtest.session import SessionConfig, WatchSession

__all__ = [
    "OutcomeRenderer",
    "format_card",
    "SessionConfig",
    "WatchSession",
]
