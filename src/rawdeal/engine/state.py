from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .actions import AbilityKind, GameOver
from .types import CardCatalog, CardDefinition, SuperstarDefinition

logger = logging.getLogger(__name__)

Event = dict[str, object]


@dataclass
class PlayerState:
    superstar: SuperstarDefinition
    ability: AbilityKind
    hand: list[str]
    # tail is the top of the arsenal, head is the bottom
    arsenal: list[str]
    ring_area: list[str] = field(default_factory=list)
    ringside_pile: list[str] = field(default_factory=list)
    fortitude_rating: int = 0

    @property
    def name(self) -> str:
        return self.superstar.name

    def card_count(self) -> int:
        return len(self.hand) + len(self.arsenal) + len(self.ring_area) + len(self.ringside_pile)


@dataclass
class GameState:
    catalog: CardCatalog
    players: list[PlayerState]
    current_player: int = 0
    # one ability per turn, reset on every handover
    ability_used_this_turn: bool = False
    turn_number: int = 0
    result: GameOver | None = None
    winner_announced: bool = False
    event_log: list[Event] = field(default_factory=list)

    def opponent(self, player: int) -> int:
        return 1 - player

    @property
    def winner(self) -> int | None:
        return self.result.winner if self.result is not None else None

    @property
    def active(self) -> PlayerState:
        return self.players[self.current_player]

    @property
    def defending(self) -> PlayerState:
        return self.players[self.opponent(self.current_player)]

    def log(self, event_type: str, **payload: object) -> None:
        event: Event = {"type": event_type}
        event.update(payload)
        self.event_log.append(event)
        logger.debug("%s %s", event_type, payload)


def viewable(catalog: CardCatalog, zone: list[str]) -> list[tuple[int, CardDefinition]]:
    """Pair each zone index with its definition, skipping titles the catalog lacks."""
    out: list[tuple[int, CardDefinition]] = []
    for i, title in enumerate(zone):
        card = catalog.find(title)
        if card is None:
            logger.warning("Card %r is not in the catalog; not shown", title)
            continue
        out.append((i, card))
    return out


def draw_card(state: GameState, player: int) -> str | None:
    ps = state.players[player]
    if not ps.arsenal:
        return None
    title = ps.arsenal.pop()
    ps.hand.append(title)
    state.log("CARD_DRAWN", player=player, title=title)
    return title


def overturn_card(state: GameState, player: int) -> str | None:
    ps = state.players[player]
    if not ps.arsenal:
        return None
    title = ps.arsenal.pop()
    ps.ringside_pile.append(title)
    state.log("CARD_OVERTURNED", player=player, title=title)
    return title


def move_card(source: list[str], index: int, target: list[str], *, to_bottom: bool = False) -> str:
    title = source.pop(index)
    if to_bottom:
        target.insert(0, title)
    else:
        target.append(title)
    return title
