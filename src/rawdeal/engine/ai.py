from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

from .actions import CardSet, NextPlay
from .table import PlayerInfo, Table
from .types import CardDefinition, DeckList


@dataclass(frozen=True)
class AISpec:
    """Simple bot tuning parameters.

    use_abilities: accept every ability the engine offers.
    max_plays_per_turn: stop playing cards after this many in one turn
      (None = play while anything is affordable).
    """

    use_abilities: bool = True
    max_plays_per_turn: int | None = None


def _card_value(card: CardDefinition) -> float:
    v = float(card.damage_value or 0)
    # cheap cards are slightly better to keep, expensive ones to play
    cost = card.fortitude_cost
    if cost is not None:
        v += cost * 0.1
    if card.has_type("Maneuver"):
        v += 0.5
    return v


def _best(cards: Sequence[CardDefinition]) -> int:
    return max(range(len(cards)), key=lambda i: _card_value(cards[i]))


def _worst(cards: Sequence[CardDefinition]) -> int:
    return min(range(len(cards)), key=lambda i: _card_value(cards[i]))


class GreedyTable(Table):
    """Headless table that plays both seats greedily.

    Plays the most damaging affordable card until nothing is left, takes
    every ability offered, keeps the best cards when forced to choose, and
    then ends the turn. Deterministic for a given pair of decks.
    """

    def __init__(self, decks: Iterable[DeckList], spec: AISpec | None = None) -> None:
        self.spec = spec or AISpec()
        self._decks = deque(decks)
        self._plays_this_turn = 0
        self._nothing_playable = False
        self.winner: str | None = None
        self.deck_rejected = False

    def _can_keep_playing(self) -> bool:
        if self._nothing_playable:
            return False
        limit = self.spec.max_plays_per_turn
        return limit is None or self._plays_this_turn < limit

    def select_deck(self) -> DeckList:
        return self._decks.popleft()

    def say_deck_is_invalid(self) -> None:
        self.deck_rejected = True

    def say_turn_begins(self, superstar_name: str) -> None:
        self._plays_this_turn = 0
        self._nothing_playable = False

    def show_game_info(self, current: PlayerInfo, opponent: PlayerInfo) -> None:
        pass

    def ask_next_play(self, ability_available: bool) -> NextPlay:
        if ability_available and self.spec.use_abilities:
            return "use_ability"
        if self._can_keep_playing():
            return "play_card"
        return "end_turn"

    def ask_card_set(self) -> CardSet:
        return "hand"

    def show_cards(self, cards: Sequence[CardDefinition]) -> None:
        pass

    def ask_to_select_play(self, plays: Sequence[CardDefinition]) -> int:
        if not plays:
            self._nothing_playable = True
            return -1
        self._plays_this_turn += 1
        return _best(plays)

    def say_player_is_trying_to_play(self, superstar_name: str, card: CardDefinition) -> None:
        pass

    def say_successfully_played(self) -> None:
        pass

    def say_superstar_takes_damage(self, superstar_name: str, amount: int) -> None:
        pass

    def show_overturned_card(self, card: CardDefinition, position: int, total: int) -> None:
        pass

    def ask_use_ability(self, superstar_name: str) -> bool:
        return self.spec.use_abilities

    def say_using_ability(self, superstar_name: str, ability: str) -> None:
        pass

    def ask_card_to_recover(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int:
        return _best(cards)

    def ask_card_to_discard(
        self,
        cards: Sequence[CardDefinition],
        owner_name: str,
        discarding_name: str,
        remaining: int,
    ) -> int:
        return _worst(cards)

    def ask_card_to_put_in_hand(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int:
        return _best(cards)

    def ask_card_to_return_to_arsenal(
        self, superstar_name: str, cards: Sequence[CardDefinition]
    ) -> int:
        return _worst(cards)

    def say_player_drew_cards(self, superstar_name: str, count: int) -> None:
        pass

    def congratulate_winner(self, superstar_name: str) -> None:
        self.winner = superstar_name
