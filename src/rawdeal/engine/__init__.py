"""Headless rules engine for Raw Deal duels.

IMPORTANT: This package never formats text or reads input; all of that goes
through a ``Table``.
"""

from .actions import AbilityKind, CardSet, GameOver, NextPlay
from .match import Game, new_game, run_turn, start_turn, take_action
from .state import GameState, PlayerState
from .table import PlayerInfo, ScriptedTable, Table
from .types import CardCatalog, CardDefinition, DeckList, RulesConfig, SuperstarDefinition
from .validation import is_deck_valid, validate_deck

__all__ = [
    "AbilityKind",
    "CardCatalog",
    "CardDefinition",
    "CardSet",
    "DeckList",
    "Game",
    "GameOver",
    "GameState",
    "NextPlay",
    "PlayerInfo",
    "PlayerState",
    "RulesConfig",
    "ScriptedTable",
    "SuperstarDefinition",
    "Table",
    "is_deck_valid",
    "new_game",
    "run_turn",
    "start_turn",
    "take_action",
    "validate_deck",
]
