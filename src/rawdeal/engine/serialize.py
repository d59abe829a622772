from __future__ import annotations

from .state import GameState, PlayerState
from .table import PlayerInfo


def player_info(p: PlayerState) -> PlayerInfo:
    return PlayerInfo(
        name=p.name,
        fortitude_rating=p.fortitude_rating,
        hand_size=len(p.hand),
        arsenal_size=len(p.arsenal),
    )


def _player_to_dict(p: PlayerState) -> dict[str, object]:
    return {
        "superstar": p.name,
        "ability": p.ability,
        "fortitude_rating": p.fortitude_rating,
        "hand": list(p.hand),
        "arsenal": list(p.arsenal),
        "ring_area": list(p.ring_area),
        "ringside_pile": list(p.ringside_pile),
    }


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "turn_number": state.turn_number,
        "current_player": state.current_player,
        "ability_used_this_turn": state.ability_used_this_turn,
        "winner": state.winner,
        "players": [_player_to_dict(p) for p in state.players],
    }
