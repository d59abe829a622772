from __future__ import annotations

import logging

from .abilities import MANKIND
from .actions import GameOver
from .state import GameState, move_card, overturn_card, viewable
from .table import Table
from .types import CardDefinition

logger = logging.getLogger(__name__)


def is_playable(card: CardDefinition, fortitude_rating: int) -> bool:
    cost = card.fortitude_cost
    if cost is None:
        return False
    return (card.has_type("Maneuver") or card.has_type("Action")) and cost <= fortitude_rating


def playable_cards(state: GameState, player: int) -> list[tuple[int, CardDefinition]]:
    """Hand cards the player can afford right now, as (hand_index, card) pairs."""
    ps = state.players[player]
    return [
        (i, card)
        for i, card in viewable(state.catalog, ps.hand)
        if is_playable(card, ps.fortitude_rating)
    ]


def damage_against(card: CardDefinition, defender_name: str) -> tuple[int, int]:
    """Return (overturn count, fortitude gain) for ``card`` hitting ``defender_name``.

    Mankind overturns one card less, but the attacker still gains the full
    printed damage.
    """
    raw = card.damage_value or 0
    if raw <= 0:
        return 0, 0
    if defender_name == MANKIND:
        applied = raw - 1
        return applied, applied + 1
    return raw, raw


def play_card(state: GameState, table: Table) -> GameOver | None:
    player = state.current_player
    ps = state.players[player]
    options = playable_cards(state, player)

    choice = table.ask_to_select_play([card for _, card in options])
    if choice < 0 or choice >= len(options):
        state.log("PLAY_CANCELLED", player=player, choice=choice)
        return None

    hand_index, card = options[choice]
    table.say_player_is_trying_to_play(ps.name, card)
    table.say_successfully_played()
    move_card(ps.hand, hand_index, ps.ring_area)
    state.log("CARD_PLAYED", player=player, title=card.title)
    return resolve_played_card(state, table, player, card)


def resolve_played_card(
    state: GameState, table: Table, attacker: int, card: CardDefinition
) -> GameOver | None:
    """Apply the damage of a card already moved to the attacker's ring area."""
    defender = state.players[state.opponent(attacker)]
    applied, gain = damage_against(card, defender.name)
    if gain <= 0:
        return None

    state.players[attacker].fortitude_rating += gain
    state.log("FORTITUDE_GAINED", player=attacker, amount=gain)
    if applied <= 0:
        return None

    table.say_superstar_takes_damage(defender.name, applied)
    return overturn_for_damage(state, table, attacker, applied)


def overturn_for_damage(
    state: GameState, table: Table, attacker: int, amount: int
) -> GameOver | None:
    defender = state.opponent(attacker)
    for i in range(amount):
        title = overturn_card(state, defender)
        if title is None:
            logger.info("%s has no arsenal left", state.players[defender].name)
            return GameOver(winner=attacker, reason="arsenal_empty")
        card = state.catalog.find(title)
        if card is None:
            logger.warning("Overturned card %r is not in the catalog; not shown", title)
            continue
        table.show_overturned_card(card, i + 1, amount)
    return None
