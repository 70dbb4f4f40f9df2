import pytest

from aoc2023.day02 import (
    Game,
    Round,
    main,
    parse_game,
    parse_games,
    possible_id_sum,
    power_sum,
)

EXAMPLE_GAME = "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green"


def test_parse_game_reads_rounds():
    game = parse_game(EXAMPLE_GAME)
    assert game == Game(
        1,
        (Round(red=4, blue=3), Round(red=1, green=2, blue=6), Round(green=2)),
    )


def test_example_power():
    assert parse_game(EXAMPLE_GAME).power() == 48


def test_example_is_possible_with_default_bag():
    assert parse_game(EXAMPLE_GAME).is_possible() is True


def test_round_exceeding_bag_is_impossible():
    game = parse_game("Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red")
    assert game.is_possible() is False
    assert game.is_possible(red=20, green=8, blue=6) is True


def test_missing_colour_gives_zero_power():
    assert parse_game("Game 2: 3 red; 5 blue").power() == 0


@pytest.mark.parametrize(
    "line",
    [
        "Game 1 3 blue",
        "Game x: 3 blue",
        "Game 1: 3 purple",
        "Game 1: blue",
        "Game 1: 3 blue 4",
        "Game 1: three blue",
    ],
)
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        parse_game(line)


def test_parse_games_skips_malformed_lines():
    text = "\n".join([EXAMPLE_GAME, "garbage", "Game 7: 2 red"])
    games = parse_games(text)
    assert [g.id for g in games] == [1, 7]


def test_possible_id_sum_counts_only_possible_games():
    games = parse_games("Game 4: 1 red\nGame 9: 99 red\nGame 5: 2 blue")
    assert possible_id_sum(games) == 4 + 5
    assert possible_id_sum(games, red=99) == 4 + 9 + 5


def test_power_sum_is_sum_of_powers():
    games = parse_games(EXAMPLE_GAME + "\nGame 2: 1 red, 1 green, 1 blue")
    assert power_sum(games) == sum(g.power() for g in games)
    assert power_sum([]) == 0


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_GAME + "\n")
    main([str(path)])
    games = parse_games(EXAMPLE_GAME)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"res {possible_id_sum(games)}", f"res {power_sum(games)}"]