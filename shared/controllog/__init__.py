"""Controllable logging SDK (events + balanced postings).

Records what happened during a round as JSON lines:
- State transitions (truth.state)
- Time tracking (resource.time_ms)
- Score awarded to the player (value.utility)
"""

from .sdk import init, event, post, new_id, is_initialized
from .builders import (
    round_start,
    word_submitted,
    state_move,
)

__all__ = [
    "init",
    "event",
    "post",
    "new_id",
    "is_initialized",
    "round_start",
    "word_submitted",
    "state_move",
]
