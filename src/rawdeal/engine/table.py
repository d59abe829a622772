"""The presentation boundary.

The engine never formats text or reads input itself. It asks a ``Table``
questions and pushes notifications to it; every call blocks until the table
answers. Card lists are handed over as definitions and the table decides how
to render them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

from .actions import CardSet, NextPlay
from .types import CardDefinition, DeckList


class ScriptExhaustedError(RuntimeError):
    pass


@dataclass(frozen=True)
class PlayerInfo:
    name: str
    fortitude_rating: int
    hand_size: int
    arsenal_size: int


class Table(ABC):
    @abstractmethod
    def select_deck(self) -> DeckList: ...

    @abstractmethod
    def say_deck_is_invalid(self) -> None: ...

    @abstractmethod
    def say_turn_begins(self, superstar_name: str) -> None: ...

    @abstractmethod
    def show_game_info(self, current: PlayerInfo, opponent: PlayerInfo) -> None: ...

    @abstractmethod
    def ask_next_play(self, ability_available: bool) -> NextPlay:
        """Ask what to do next; ``use_ability`` is only a legal answer when offered."""

    @abstractmethod
    def ask_card_set(self) -> CardSet: ...

    @abstractmethod
    def show_cards(self, cards: Sequence[CardDefinition]) -> None: ...

    @abstractmethod
    def ask_to_select_play(self, plays: Sequence[CardDefinition]) -> int:
        """Return an index into ``plays``; anything out of range cancels."""

    @abstractmethod
    def say_player_is_trying_to_play(self, superstar_name: str, card: CardDefinition) -> None: ...

    @abstractmethod
    def say_successfully_played(self) -> None: ...

    @abstractmethod
    def say_superstar_takes_damage(self, superstar_name: str, amount: int) -> None: ...

    @abstractmethod
    def show_overturned_card(self, card: CardDefinition, position: int, total: int) -> None: ...

    @abstractmethod
    def ask_use_ability(self, superstar_name: str) -> bool: ...

    @abstractmethod
    def say_using_ability(self, superstar_name: str, ability: str) -> None: ...

    @abstractmethod
    def ask_card_to_recover(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int: ...

    @abstractmethod
    def ask_card_to_discard(
        self,
        cards: Sequence[CardDefinition],
        owner_name: str,
        discarding_name: str,
        remaining: int,
    ) -> int: ...

    @abstractmethod
    def ask_card_to_put_in_hand(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int: ...

    @abstractmethod
    def ask_card_to_return_to_arsenal(
        self, superstar_name: str, cards: Sequence[CardDefinition]
    ) -> int: ...

    @abstractmethod
    def say_player_drew_cards(self, superstar_name: str, count: int) -> None: ...

    @abstractmethod
    def congratulate_winner(self, superstar_name: str) -> None: ...


ScriptLine = tuple[object, ...]


class ScriptedTable(Table):
    """Deterministic table driven by queued answers.

    Every notification and question is appended to ``script`` as a tuple so
    tests can compare full transcripts. Card selections (recover, discard,
    put in hand, return to arsenal) share one queue and are consumed in the
    order the engine asks for them.
    """

    def __init__(
        self,
        decks: Iterable[DeckList] = (),
        plays: Iterable[NextPlay] = (),
        card_sets: Iterable[CardSet] = (),
        play_choices: Iterable[int] = (),
        ability_answers: Iterable[bool] = (),
        selections: Iterable[int] = (),
    ) -> None:
        self._decks = deque(decks)
        self._plays = deque(plays)
        self._card_sets = deque(card_sets)
        self._play_choices = deque(play_choices)
        self._ability_answers = deque(ability_answers)
        self._selections = deque(selections)
        self.script: list[ScriptLine] = []

    def _next(self, queue: deque, what: str):
        if not queue:
            raise ScriptExhaustedError(f"No scripted answer left for {what}")
        return queue.popleft()

    def _titles(self, cards: Sequence[CardDefinition]) -> tuple[str, ...]:
        return tuple(c.title for c in cards)

    def select_deck(self) -> DeckList:
        deck = self._next(self._decks, "select_deck")
        self.script.append(("select_deck", deck.superstar_name))
        return deck

    def say_deck_is_invalid(self) -> None:
        self.script.append(("deck_invalid",))

    def say_turn_begins(self, superstar_name: str) -> None:
        self.script.append(("turn_begins", superstar_name))

    def show_game_info(self, current: PlayerInfo, opponent: PlayerInfo) -> None:
        self.script.append(("game_info", current, opponent))

    def ask_next_play(self, ability_available: bool) -> NextPlay:
        choice = self._next(self._plays, "ask_next_play")
        self.script.append(("next_play", ability_available, choice))
        return choice

    def ask_card_set(self) -> CardSet:
        choice = self._next(self._card_sets, "ask_card_set")
        self.script.append(("card_set", choice))
        return choice

    def show_cards(self, cards: Sequence[CardDefinition]) -> None:
        self.script.append(("show_cards", self._titles(cards)))

    def ask_to_select_play(self, plays: Sequence[CardDefinition]) -> int:
        choice = self._next(self._play_choices, "ask_to_select_play")
        self.script.append(("select_play", self._titles(plays), choice))
        return choice

    def say_player_is_trying_to_play(self, superstar_name: str, card: CardDefinition) -> None:
        self.script.append(("trying_to_play", superstar_name, card.title, card.played_as))

    def say_successfully_played(self) -> None:
        self.script.append(("played",))

    def say_superstar_takes_damage(self, superstar_name: str, amount: int) -> None:
        self.script.append(("takes_damage", superstar_name, amount))

    def show_overturned_card(self, card: CardDefinition, position: int, total: int) -> None:
        self.script.append(("overturned", card.title, position, total))

    def ask_use_ability(self, superstar_name: str) -> bool:
        answer = self._next(self._ability_answers, "ask_use_ability")
        self.script.append(("use_ability?", superstar_name, answer))
        return answer

    def say_using_ability(self, superstar_name: str, ability: str) -> None:
        self.script.append(("using_ability", superstar_name))

    def ask_card_to_recover(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int:
        choice = self._next(self._selections, "ask_card_to_recover")
        self.script.append(("recover", superstar_name, remaining, self._titles(cards), choice))
        return choice

    def ask_card_to_discard(
        self,
        cards: Sequence[CardDefinition],
        owner_name: str,
        discarding_name: str,
        remaining: int,
    ) -> int:
        choice = self._next(self._selections, "ask_card_to_discard")
        self.script.append(("discard", owner_name, remaining, self._titles(cards), choice))
        return choice

    def ask_card_to_put_in_hand(
        self, superstar_name: str, remaining: int, cards: Sequence[CardDefinition]
    ) -> int:
        choice = self._next(self._selections, "ask_card_to_put_in_hand")
        self.script.append(("put_in_hand", superstar_name, remaining, self._titles(cards), choice))
        return choice

    def ask_card_to_return_to_arsenal(
        self, superstar_name: str, cards: Sequence[CardDefinition]
    ) -> int:
        choice = self._next(self._selections, "ask_card_to_return_to_arsenal")
        self.script.append(("return_to_arsenal", superstar_name, self._titles(cards), choice))
        return choice

    def say_player_drew_cards(self, superstar_name: str, count: int) -> None:
        self.script.append(("drew", superstar_name, count))

    def congratulate_winner(self, superstar_name: str) -> None:
        self.script.append(("winner", superstar_name))
