from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from rawdeal.engine.types import CardCatalog, CardDefinition, DeckList, SuperstarDefinition

SUPERSTAR_CARD_SUFFIX = " (Superstar Card)"


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_schema(path: Path) -> object:
    return _load_json(path)


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


def _require_str_list(obj: Mapping[str, object], key: str) -> tuple[str, ...]:
    v = obj.get(key)
    if not isinstance(v, list) or not all(isinstance(item, str) for item in v):
        raise ContentError(f"Expected list of strings for {key}")
    return tuple(v)


def _parse_card(raw: Mapping[str, object]) -> CardDefinition:
    return CardDefinition(
        title=_require_str(raw, "Title"),
        types=_require_str_list(raw, "Types"),
        subtypes=_require_str_list(raw, "Subtypes"),
        fortitude=_require_str(raw, "Fortitude"),
        damage=_require_str(raw, "Damage"),
        stun_value=_require_str(raw, "StunValue"),
        card_effect=_require_str(raw, "CardEffect"),
    )


def _parse_superstar(raw: Mapping[str, object]) -> SuperstarDefinition:
    return SuperstarDefinition(
        name=_require_str(raw, "Name"),
        logo=_require_str(raw, "Logo"),
        hand_size=_require_int(raw, "HandSize"),
        superstar_value=_require_int(raw, "SuperstarValue"),
        superstar_ability=_require_str(raw, "SuperstarAbility"),
    )


def parse_deck_lines(lines: list[str], *, context: str) -> DeckList:
    """Parse a deck list: the superstar card first, then one card title per line."""
    entries = [line.strip() for line in lines if line.strip()]
    if not entries:
        raise ContentError(f"Empty deck list: {context}")
    head = entries[0]
    if not head.endswith(SUPERSTAR_CARD_SUFFIX):
        raise ContentError(f"First line of {context} must name a superstar card, got {head!r}")
    return DeckList(
        superstar_name=head[: -len(SUPERSTAR_CARD_SUFFIX)],
        cards=tuple(entries[1:]),
    )


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def _load_list(self, filename: str, schema_name: str) -> list[Mapping[str, object]]:
        path = self._data_dir / filename
        raw = _load_json(path)
        validate_json(raw, _load_schema(self._schema_dir / schema_name), context=str(path))
        if not isinstance(raw, list):
            raise ContentError(f"{filename} must be a list")
        return [item for item in raw if isinstance(item, dict)]

    def load_cards(self) -> dict[str, CardDefinition]:
        cards: dict[str, CardDefinition] = {}
        for item in self._load_list("cards.json", "cards.schema.json"):
            card = _parse_card(item)
            if card.title in cards:
                raise ContentError(f"Duplicate card title: {card.title}")
            cards[card.title] = card
        return cards

    def load_superstars(self) -> dict[str, SuperstarDefinition]:
        superstars: dict[str, SuperstarDefinition] = {}
        for item in self._load_list("superstar.json", "superstar.schema.json"):
            superstar = _parse_superstar(item)
            if superstar.name in superstars:
                raise ContentError(f"Duplicate superstar: {superstar.name}")
            superstars[superstar.name] = superstar
        return superstars

    def load_catalog(self) -> CardCatalog:
        return CardCatalog(cards=self.load_cards(), superstars=self.load_superstars())

    def load_deck(self, path: Path) -> DeckList:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContentError(f"Cannot read deck file {path}: {e}") from e
        return parse_deck_lines(text.splitlines(), context=str(path))

    def list_decks(self, decks_dir: Path) -> list[Path]:
        return sorted(decks_dir.glob("*.txt"))

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_catalog()
