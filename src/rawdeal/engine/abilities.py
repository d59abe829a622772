"""Superstar abilities.

The set is closed: each superstar name maps to one ``AbilityKind`` at game
setup and everything else dispatches on the kind. Adding an ability means one
entry in ``SUPERSTAR_ABILITIES`` and one resolver below.

Rock and Kane fire at the start of their owner's turn and do not touch the
once-per-turn gate. Undertaker, Jericho and Stone Cold are chosen as an action
and close the gate for the rest of the turn.
"""

from __future__ import annotations

import logging
from typing import Callable

from .actions import AbilityKind
from .state import GameState, PlayerState, draw_card, move_card, overturn_card, viewable
from .table import Table
from .types import CardDefinition

logger = logging.getLogger(__name__)

THE_ROCK = "THE ROCK"
KANE = "KANE"
THE_UNDERTAKER = "THE UNDERTAKER"
CHRIS_JERICHO = "CHRIS JERICHO"
STONE_COLD = "STONE COLD STEVE AUSTIN"
MANKIND = "MANKIND"

SUPERSTAR_ABILITIES: dict[str, AbilityKind] = {
    THE_ROCK: "rock",
    KANE: "kane",
    THE_UNDERTAKER: "undertaker",
    CHRIS_JERICHO: "jericho",
    STONE_COLD: "stone_cold",
}


class InvalidSelectionError(ValueError):
    pass


def ability_for(superstar_name: str) -> AbilityKind:
    return SUPERSTAR_ABILITIES.get(superstar_name, "none")


def _pick(options: list[tuple[int, CardDefinition]], choice: int) -> int:
    # Ability selections have no cancel path once the ability has started.
    if choice < 0 or choice >= len(options):
        raise InvalidSelectionError(f"Selection {choice} out of range 0..{len(options) - 1}")
    return options[choice][0]


def _cards(options: list[tuple[int, CardDefinition]]) -> list[CardDefinition]:
    return [card for _, card in options]


def _use_rock(state: GameState, table: Table, player: int) -> None:
    ps = state.players[player]
    if not ps.ringside_pile:
        return
    if not table.ask_use_ability(ps.name):
        return
    table.say_using_ability(ps.name, ps.superstar.superstar_ability)
    options = viewable(state.catalog, ps.ringside_pile)
    index = _pick(options, table.ask_card_to_recover(ps.name, 1, _cards(options)))
    title = move_card(ps.ringside_pile, index, ps.arsenal, to_bottom=True)
    state.log("CARD_RECOVERED", player=player, title=title)


def _use_kane(state: GameState, table: Table, player: int) -> None:
    ps = state.players[player]
    opp_index = state.opponent(player)
    opp = state.players[opp_index]
    table.say_using_ability(ps.name, ps.superstar.superstar_ability)
    table.say_superstar_takes_damage(opp.name, 1)
    # No elimination check here, unlike damage from a played card.
    title = overturn_card(state, opp_index)
    if title is None:
        return
    card = state.catalog.find(title)
    if card is not None:
        table.show_overturned_card(card, 1, 1)


def run_start_of_turn_abilities(state: GameState, table: Table) -> None:
    player = state.current_player
    kind = state.players[player].ability
    if kind == "rock":
        _use_rock(state, table, player)
    elif kind == "kane":
        _use_kane(state, table, player)


def _discard_from_hand(
    state: GameState, table: Table, owner: int, remaining: int
) -> None:
    ps = state.players[owner]
    options = viewable(state.catalog, ps.hand)
    choice = table.ask_card_to_discard(_cards(options), ps.name, ps.name, remaining)
    title = move_card(ps.hand, _pick(options, choice), ps.ringside_pile)
    state.log("CARD_DISCARDED", player=owner, title=title)


def _use_undertaker(state: GameState, table: Table, player: int) -> None:
    ps = state.players[player]
    table.say_using_ability(ps.name, ps.superstar.superstar_ability)
    for i in range(2):
        _discard_from_hand(state, table, player, 2 - i)

    options = viewable(state.catalog, ps.ringside_pile)
    choice = table.ask_card_to_put_in_hand(ps.name, 1, _cards(options))
    title = move_card(ps.ringside_pile, _pick(options, choice), ps.hand)
    state.log("CARD_RECOVERED", player=player, title=title)


def _use_jericho(state: GameState, table: Table, player: int) -> None:
    ps = state.players[player]
    table.say_using_ability(ps.name, ps.superstar.superstar_ability)
    _discard_from_hand(state, table, player, 1)

    opp_index = state.opponent(player)
    if not state.players[opp_index].hand:
        logger.debug("%s has no cards to discard", state.players[opp_index].name)
        return
    _discard_from_hand(state, table, opp_index, 1)


def _use_stone_cold(state: GameState, table: Table, player: int) -> None:
    ps = state.players[player]
    table.say_using_ability(ps.name, ps.superstar.superstar_ability)
    draw_card(state, player)
    table.say_player_drew_cards(ps.name, 1)

    options = viewable(state.catalog, ps.hand)
    choice = table.ask_card_to_return_to_arsenal(ps.name, _cards(options))
    title = move_card(ps.hand, _pick(options, choice), ps.arsenal, to_bottom=True)
    state.log("CARD_RETURNED", player=player, title=title)


_ACTION_ABILITIES: dict[AbilityKind, Callable[[GameState, Table, int], None]] = {
    "undertaker": _use_undertaker,
    "jericho": _use_jericho,
    "stone_cold": _use_stone_cold,
}


def _precondition_met(ps: PlayerState) -> bool:
    if ps.ability == "undertaker":
        return len(ps.hand) >= 2
    if ps.ability == "jericho":
        return len(ps.hand) >= 1
    if ps.ability == "stone_cold":
        return len(ps.hand) >= 1 and len(ps.arsenal) > 0
    return False


def can_use_ability(state: GameState) -> bool:
    if state.ability_used_this_turn:
        return False
    return _precondition_met(state.active)


def use_ability(state: GameState, table: Table) -> bool:
    """Resolve the active player's action ability. Returns False when it is not available."""
    if not can_use_ability(state):
        return False
    player = state.current_player
    kind = state.players[player].ability
    _ACTION_ABILITIES[kind](state, table, player)
    state.ability_used_this_turn = True
    state.log("ABILITY_USED", player=player, ability=kind)
    return True
