from __future__ import annotations

from collections import Counter
from typing import Sequence

from .types import CardCatalog, CardDefinition, RulesConfig


def validate_deck(
    deck: Sequence[str],
    superstar_name: str,
    catalog: CardCatalog,
    config: RulesConfig | None = None,
) -> tuple[bool, str]:
    """Check a deck against the legality rules.

    Returns ``(True, "OK")`` for a legal deck, otherwise ``False`` and the
    first rule found broken. Pure: no state is read or written besides the
    arguments.
    """
    cfg = config or RulesConfig()

    cards: list[CardDefinition] = []
    for title in deck:
        card = catalog.find(title)
        if card is None:
            return False, f"Unknown card: {title}."
        cards.append(card)

    seen_unique: set[str] = set()
    for card in cards:
        if card.has_subtype("Unique") and not card.has_subtype("SetUp"):
            if card.title in seen_unique:
                return False, f"Unique card {card.title} appears more than once."
            seen_unique.add(card.title)

    counts = Counter(card.title for card in cards)
    for title, count in counts.items():
        if count > cfg.max_copies and not catalog.get(title).has_subtype("SetUp"):
            return False, f"Too many copies of {title} ({count} > {cfg.max_copies})."

    superstar = catalog.superstars.get(superstar_name)
    if len(cards) != cfg.deck_size:
        return False, f"Deck must be exactly {cfg.deck_size} cards."
    if any(c.has_subtype("Heel") for c in cards) and any(c.has_subtype("Face") for c in cards):
        return False, "Deck mixes Heel and Face cards."
    if superstar is None:
        return False, f"Unknown superstar: {superstar_name}."

    logos = catalog.logos()
    for card in cards:
        for subtype in card.subtypes:
            if subtype in logos and subtype != superstar.logo:
                return False, f"{card.title} belongs to the {subtype} roster."

    return True, "OK"


def is_deck_valid(
    deck: Sequence[str],
    superstar_name: str,
    catalog: CardCatalog,
    config: RulesConfig | None = None,
) -> bool:
    ok, _ = validate_deck(deck, superstar_name, catalog, config)
    return ok
