from __future__ import annotations

from rawdeal.engine.abilities import ability_for
from rawdeal.engine.actions import GameOver
from rawdeal.engine.match import Game, end_turn, finish, new_game, run_turn, start_turn, take_action
from rawdeal.engine.state import GameState, PlayerState
from rawdeal.engine.table import PlayerInfo, ScriptedTable
from rawdeal.engine.types import DeckList
from rawdeal.paths import get_paths
from rawdeal.services.content import ContentService


def _content() -> ContentService:
    paths = get_paths()
    return ContentService(paths.data_dir, paths.schema_dir)


def _deck(name: str) -> DeckList:
    return _content().load_deck(get_paths().decks_dir / name)


def _with_superstar(deck: DeckList, superstar_name: str) -> DeckList:
    return DeckList(superstar_name=superstar_name, cards=deck.cards)


def _bare_state(name0: str, name1: str) -> GameState:
    catalog = _content().load_catalog()
    return GameState(
        catalog=catalog,
        players=[
            PlayerState(superstar=catalog.superstar(n), ability=ability_for(n), hand=[], arsenal=[])
            for n in (name0, name1)
        ],
    )


def test_new_game_draws_starting_hands_from_the_top() -> None:
    catalog = _content().load_catalog()
    austin = _deck("01-StoneCold.txt")
    kane = _deck("02-Kane.txt")
    state = new_game(catalog, austin, kane)

    p0, p1 = state.players
    assert len(p0.hand) == 7
    assert len(p0.arsenal) == 53
    assert p0.hand[0] == austin.cards[-1]
    assert p0.arsenal == list(austin.cards[:53])
    assert len(p1.hand) == 7
    assert p0.ability == "stone_cold"
    assert p1.ability == "kane"
    assert all(p.card_count() == 60 for p in state.players)


def test_higher_superstar_value_goes_first() -> None:
    catalog = _content().load_catalog()
    austin = _deck("01-StoneCold.txt")
    kane = _deck("02-Kane.txt")
    assert new_game(catalog, austin, kane).current_player == 0
    assert new_game(catalog, kane, austin).current_player == 1


def test_tie_goes_to_first_listed_player() -> None:
    catalog = _content().load_catalog()
    deck = _deck("02-Kane.txt")
    rock = _with_superstar(deck, "THE ROCK")
    austin = _with_superstar(deck, "STONE COLD STEVE AUSTIN")
    assert new_game(catalog, rock, austin).current_player == 0
    assert new_game(catalog, austin, rock).current_player == 0


def test_invalid_first_deck_aborts_setup() -> None:
    table = ScriptedTable(decks=[_deck("04-Undertaker-invalid.txt"), _deck("01-StoneCold.txt")])
    game = Game(_content().load_catalog(), table)

    assert game.play() is None
    assert game.state is None
    assert table.script == [("select_deck", "THE UNDERTAKER"), ("deck_invalid",)]


def test_invalid_second_deck_aborts_setup() -> None:
    table = ScriptedTable(decks=[_deck("01-StoneCold.txt"), _deck("04-Undertaker-invalid.txt")])

    assert Game(_content().load_catalog(), table).play() is None
    assert table.script == [
        ("select_deck", "STONE COLD STEVE AUSTIN"),
        ("select_deck", "THE UNDERTAKER"),
        ("deck_invalid",),
    ]


def test_mankind_draws_two() -> None:
    state = _bare_state("MANKIND", "HHH")
    state.players[0].arsenal = ["Chop", "Punch", "Kick"]
    start_turn(state, ScriptedTable())
    assert state.players[0].hand == ["Kick", "Punch"]
    assert state.players[0].arsenal == ["Chop"]

    state.players[0].arsenal = ["Chop"]
    state.players[0].hand = []
    start_turn(state, ScriptedTable())
    assert state.players[0].hand == ["Chop"]


def test_draw_from_empty_arsenal_is_a_no_op() -> None:
    state = _bare_state("HHH", "KANE")
    start_turn(state, ScriptedTable())
    assert state.players[0].hand == []
    assert state.result is None


def test_end_turn_checks_own_arsenal_first() -> None:
    state = _bare_state("HHH", "KANE")
    assert end_turn(state) == GameOver(winner=1, reason="arsenal_empty")

    state.players[0].arsenal = ["Chop"]
    assert end_turn(state) == GameOver(winner=0, reason="arsenal_empty")

    state.players[1].arsenal = ["Chop"]
    assert end_turn(state) is None
    assert state.current_player == 1


def test_give_up_hands_the_win_to_the_opponent() -> None:
    state = _bare_state("HHH", "KANE")
    state.players[0].arsenal = ["Chop"]
    table = ScriptedTable()
    assert take_action(state, table, "give_up") == GameOver(winner=1, reason="gave_up")
    assert table.script == []


def test_no_actions_after_game_over() -> None:
    state = _bare_state("HHH", "KANE")
    state.players[0].hand = ["Chop"]
    state.result = GameOver(winner=1, reason="arsenal_empty")
    table = ScriptedTable(play_choices=[0])
    assert take_action(state, table, "play_card") == state.result
    assert state.players[0].hand == ["Chop"]
    assert table.script == []


def test_eliminating_play_closes_the_game_for_later_actions() -> None:
    state = _bare_state("KANE", "HHH")
    state.players[0].hand = ["Chop", "Chop"]
    state.players[1].arsenal = ["Punch"]
    table = ScriptedTable(play_choices=[0, 0])

    result = take_action(state, table, "play_card")

    assert result == GameOver(winner=0, reason="arsenal_empty")
    assert state.result == result
    assert take_action(state, table, "play_card") == result
    assert take_action(state, table, "give_up") == result
    assert state.players[0].hand == ["Chop"]
    assert state.players[0].ring_area == ["Chop"]
    assert sum(1 for line in table.script if line[0] == "select_play") == 1


def test_give_up_is_recorded_on_the_state() -> None:
    state = _bare_state("HHH", "KANE")
    take_action(state, ScriptedTable(), "give_up")
    assert state.winner == 1
    assert take_action(state, ScriptedTable(), "end_turn") == GameOver(winner=1, reason="gave_up")
    assert state.current_player == 0


def test_elimination_by_a_played_card_skips_the_rest_of_the_turn() -> None:
    state = _bare_state("HHH", "THE ROCK")
    state.players[0].hand = ["Chop", "Chop"]
    state.players[0].arsenal = ["Kick"]
    state.players[1].arsenal = ["Punch"]
    table = ScriptedTable(plays=["play_card", "play_card", "end_turn"], play_choices=[0, 0])

    result = run_turn(state, table)
    assert result == GameOver(winner=0, reason="arsenal_empty")
    finish(state, table, result)
    finish(state, table, result)

    kinds = [line[0] for line in table.script]
    assert kinds.count("next_play") == 1
    assert kinds.count("select_play") == 1
    assert kinds.count("winner") == 1
    assert table.script[-1] == ("winner", "HHH")
    assert state.players[0].hand == ["Chop", "Kick"]
    assert state.current_player == 0
    assert [e["type"] for e in state.event_log].count("GAME_ENDED") == 1


def test_show_cards_uses_the_chosen_zone() -> None:
    state = _bare_state("HHH", "KANE")
    state.players[0].hand = ["Chop"]
    state.players[1].ringside_pile = ["Punch", "Unknown Card", "Kick"]
    table = ScriptedTable(card_sets=["opponent_ringside_pile", "hand"])

    take_action(state, table, "show_cards")
    take_action(state, table, "show_cards")

    shown = [line for line in table.script if line[0] == "show_cards"]
    assert shown == [("show_cards", ("Punch", "Kick")), ("show_cards", ("Chop",))]
    assert table.script[2][0] == "game_info"


def test_ability_is_offered_once_per_turn() -> None:
    state = _bare_state("STONE COLD STEVE AUSTIN", "HHH")
    state.players[0].hand = ["Chop"]
    state.players[0].arsenal = ["Kick", "Punch", "Arm Bar"]
    state.players[1].arsenal = ["Chop"] * 5
    table = ScriptedTable(plays=["use_ability", "end_turn"], selections=[0])

    assert run_turn(state, table) is None

    offers = [line for line in table.script if line[0] == "next_play"]
    assert offers == [
        ("next_play", True, "use_ability"),
        ("next_play", False, "end_turn"),
    ]
    assert state.current_player == 1


def test_turns_alternate_until_an_arsenal_runs_out() -> None:
    austin = _deck("01-StoneCold.txt")
    kane = _deck("02-Kane.txt")
    table = ScriptedTable(decks=[austin, kane], plays=["end_turn"] * 100)
    game = Game(_content().load_catalog(), table)

    result = game.play()

    # Kane overturns one card a turn on top of Austin's own draw
    assert result == GameOver(winner=1, reason="arsenal_empty")
    state = game.state
    assert state is not None
    assert state.winner == 1
    assert state.turn_number == 53
    assert [p.fortitude_rating for p in state.players] == [0, 0]
    assert all(p.card_count() == 60 for p in state.players)

    starts = [e["player"] for e in state.event_log if e["type"] == "TURN_STARTED"]
    assert starts == [i % 2 for i in range(53)]
    assert table.script[-1] == ("winner", "KANE")
    assert sum(1 for line in table.script if line[0] == "winner") == 1


def test_scripted_opening_turns() -> None:
    austin = _deck("01-StoneCold.txt")
    kane = _deck("02-Kane.txt")
    table = ScriptedTable(decks=[austin, kane], plays=["end_turn", "end_turn", "give_up"])

    result = Game(_content().load_catalog(), table).play()

    assert result == GameOver(winner=1, reason="gave_up")
    lines = table.script
    assert lines[:5] == [
        ("select_deck", "STONE COLD STEVE AUSTIN"),
        ("select_deck", "KANE"),
        ("turn_begins", "STONE COLD STEVE AUSTIN"),
        (
            "game_info",
            PlayerInfo("STONE COLD STEVE AUSTIN", 0, 8, 52),
            PlayerInfo("KANE", 0, 7, 53),
        ),
        ("next_play", True, "end_turn"),
    ]
    assert lines[5:8] == [
        ("turn_begins", "KANE"),
        ("using_ability", "KANE"),
        ("takes_damage", "STONE COLD STEVE AUSTIN", 1),
    ]
    assert lines[8][0] == "overturned"
    assert lines[9] == (
        "game_info",
        PlayerInfo("KANE", 0, 8, 52),
        PlayerInfo("STONE COLD STEVE AUSTIN", 0, 8, 51),
    )
    assert lines[-1] == ("winner", "KANE")
