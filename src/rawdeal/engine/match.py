from __future__ import annotations

import logging

from .abilities import MANKIND, ability_for, can_use_ability, run_start_of_turn_abilities, use_ability
from .actions import CardSet, GameOver, NextPlay
from .combat import play_card
from .serialize import player_info
from .state import GameState, PlayerState, draw_card, viewable
from .table import Table
from .types import CardCatalog, DeckList, RulesConfig
from .validation import validate_deck

logger = logging.getLogger(__name__)


def _new_player(catalog: CardCatalog, deck: DeckList) -> PlayerState:
    superstar = catalog.superstar(deck.superstar_name)
    return PlayerState(
        superstar=superstar,
        ability=ability_for(superstar.name),
        hand=[],
        arsenal=list(deck.cards),
    )


def new_game(catalog: CardCatalog, deck0: DeckList, deck1: DeckList) -> GameState:
    """Build the state for two already validated decks.

    Each player draws their superstar's hand size from the top of the
    arsenal. Player 0 goes first when its superstar value is greater than or
    equal to player 1's.
    """
    state = GameState(catalog=catalog, players=[_new_player(catalog, deck0), _new_player(catalog, deck1)])
    for player, ps in enumerate(state.players):
        for _ in range(min(ps.superstar.hand_size, len(ps.arsenal))):
            draw_card(state, player)

    p0, p1 = state.players
    state.current_player = 0 if p0.superstar.superstar_value >= p1.superstar.superstar_value else 1
    state.log("GAME_STARTED", first_player=state.current_player)
    return state


def _show_game_info(state: GameState, table: Table) -> None:
    table.show_game_info(player_info(state.active), player_info(state.defending))


def start_turn(state: GameState, table: Table) -> None:
    state.ability_used_this_turn = False
    state.turn_number += 1
    ps = state.active
    state.log("TURN_STARTED", player=state.current_player, turn=state.turn_number)

    table.say_turn_begins(ps.name)
    run_start_of_turn_abilities(state, table)

    draw_card(state, state.current_player)
    if ps.name == MANKIND and ps.arsenal:
        draw_card(state, state.current_player)
    _show_game_info(state, table)


def _zone_for(state: GameState, card_set: CardSet) -> list[str]:
    if card_set == "hand":
        return state.active.hand
    if card_set == "ring_area":
        return state.active.ring_area
    if card_set == "ringside_pile":
        return state.active.ringside_pile
    if card_set == "opponent_ring_area":
        return state.defending.ring_area
    return state.defending.ringside_pile


def show_cards(state: GameState, table: Table) -> None:
    zone = _zone_for(state, table.ask_card_set())
    table.show_cards([card for _, card in viewable(state.catalog, zone)])


def end_turn(state: GameState) -> GameOver | None:
    """Check both arsenals (own first) and hand control to the opponent."""
    current = state.current_player
    opponent = state.opponent(current)
    if not state.players[current].arsenal:
        return GameOver(winner=opponent, reason="arsenal_empty")
    if not state.players[opponent].arsenal:
        return GameOver(winner=current, reason="arsenal_empty")

    state.log("TURN_ENDED", player=current)
    state.current_player = opponent
    return None


def take_action(state: GameState, table: Table, choice: NextPlay) -> GameOver | None:
    """Resolve one chosen action. A returned ``GameOver`` is also kept on the state."""
    if state.result is not None:
        return state.result

    result: GameOver | None = None
    if choice == "end_turn":
        result = end_turn(state)
    elif choice == "give_up":
        state.log("GAVE_UP", player=state.current_player)
        result = GameOver(winner=state.opponent(state.current_player), reason="gave_up")
    elif choice == "use_ability":
        if not use_ability(state, table):
            logger.warning("%s cannot use an ability now", state.active.name)
    elif choice == "show_cards":
        show_cards(state, table)
    elif choice == "play_card":
        result = play_card(state, table)

    if result is not None:
        state.result = result
        return result
    if choice != "end_turn":
        _show_game_info(state, table)
    return None


def run_turn(state: GameState, table: Table) -> GameOver | None:
    """Play one full turn; None means control passed to the opponent."""
    start_turn(state, table)
    while True:
        choice = table.ask_next_play(can_use_ability(state))
        result = take_action(state, table, choice)
        if result is not None:
            return result
        if choice == "end_turn":
            return None


def finish(state: GameState, table: Table, result: GameOver) -> None:
    if state.winner_announced:
        return
    state.result = result
    state.winner_announced = True
    winner = state.players[result.winner]
    state.log("GAME_ENDED", winner=result.winner, reason=result.reason)
    logger.info("%s wins (%s) after %d turns", winner.name, result.reason, state.turn_number)
    table.congratulate_winner(winner.name)


class Game:
    def __init__(self, catalog: CardCatalog, table: Table, config: RulesConfig | None = None) -> None:
        self.catalog = catalog
        self.table = table
        self.config = config or RulesConfig()
        self.state: GameState | None = None

    def _select_valid_deck(self) -> DeckList | None:
        deck = self.table.select_deck()
        ok, reason = validate_deck(deck.cards, deck.superstar_name, self.catalog, self.config)
        if not ok:
            logger.info("Deck for %s rejected: %s", deck.superstar_name, reason)
            self.table.say_deck_is_invalid()
            return None
        return deck

    def setup(self) -> GameState | None:
        deck0 = self._select_valid_deck()
        if deck0 is None:
            return None
        deck1 = self._select_valid_deck()
        if deck1 is None:
            return None
        self.state = new_game(self.catalog, deck0, deck1)
        return self.state

    def play(self) -> GameOver | None:
        """Run a whole game. Returns None when a deck was rejected at setup."""
        state = self.setup()
        if state is None:
            return None

        result: GameOver | None = None
        while result is None:
            result = run_turn(state, self.table)
        finish(state, self.table, result)
        return result
