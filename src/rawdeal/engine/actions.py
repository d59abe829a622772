from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NextPlay = Literal["use_ability", "show_cards", "play_card", "end_turn", "give_up"]

CardSet = Literal[
    "hand",
    "ring_area",
    "ringside_pile",
    "opponent_ring_area",
    "opponent_ringside_pile",
]

AbilityKind = Literal["rock", "kane", "undertaker", "jericho", "stone_cold", "none"]

GameOverReason = Literal["arsenal_empty", "gave_up"]


@dataclass(frozen=True)
class GameOver:
    """Terminal result. Every step returns one of these or None (ongoing)."""

    winner: int
    reason: GameOverReason
