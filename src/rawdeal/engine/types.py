from __future__ import annotations

from dataclasses import dataclass


class CardNotFoundError(LookupError):
    pass


class SuperstarNotFoundError(LookupError):
    pass


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class CardDefinition:
    title: str
    types: tuple[str, ...]
    subtypes: tuple[str, ...]
    fortitude: str
    damage: str
    stun_value: str
    card_effect: str = ""

    @property
    def fortitude_cost(self) -> int | None:
        return _parse_int(self.fortitude)

    @property
    def damage_value(self) -> int | None:
        return _parse_int(self.damage)

    @property
    def played_as(self) -> str:
        return self.types[0].upper() if self.types else ""

    def has_type(self, card_type: str) -> bool:
        return card_type in self.types

    def has_subtype(self, subtype: str) -> bool:
        return subtype in self.subtypes


@dataclass(frozen=True)
class SuperstarDefinition:
    name: str
    logo: str
    hand_size: int
    superstar_value: int
    superstar_ability: str


@dataclass(frozen=True)
class CardCatalog:
    """Immutable card and superstar catalog used by the engine."""

    cards: dict[str, CardDefinition]
    superstars: dict[str, SuperstarDefinition]

    def get(self, title: str) -> CardDefinition:
        try:
            return self.cards[title]
        except KeyError:
            raise CardNotFoundError(title) from None

    def find(self, title: str) -> CardDefinition | None:
        return self.cards.get(title)

    def superstar(self, name: str) -> SuperstarDefinition:
        try:
            return self.superstars[name]
        except KeyError:
            raise SuperstarNotFoundError(name) from None

    def logos(self) -> frozenset[str]:
        return frozenset(s.logo for s in self.superstars.values())


@dataclass(frozen=True)
class DeckList:
    superstar_name: str
    cards: tuple[str, ...]


@dataclass(frozen=True)
class RulesConfig:
    deck_size: int = 60
    max_copies: int = 3
