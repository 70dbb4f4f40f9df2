import pytest

from aoc2023.day10 import enclosed_tiles, farthest_distance, main, trace_loop

SQUARE = ".....\n.F-7.\n.|.|.\n.S-J.\n.....\n"


def _non_ground(text):
    return {
        (r, c)
        for r, line in enumerate(text.splitlines())
        for c, ch in enumerate(line)
        if ch != "."
    }


def test_trace_loop_covers_pipes():
    loop = trace_loop(SQUARE)
    assert set(loop) == _non_ground(SQUARE)
    assert len(loop) == len(set(loop))


def test_trace_loop_starts_at_start():
    loop = trace_loop(SQUARE)
    assert SQUARE.splitlines()[loop[0][0]][loop[0][1]] == "S"


def test_farthest_distance():
    assert farthest_distance(SQUARE) == 4


def test_farthest_is_half_loop():
    assert farthest_distance(SQUARE) == len(trace_loop(SQUARE)) // 2


def test_enclosed_tiles():
    assert enclosed_tiles(SQUARE) == 1


def test_junk_outside_loop_not_counted():
    junk = "-....\n.F-7.\n.|.|.\n.S-J.\n....|\n"
    assert enclosed_tiles(junk) == enclosed_tiles(SQUARE)
    assert set(trace_loop(junk)) == set(trace_loop(SQUARE))


def test_missing_start():
    with pytest.raises(ValueError):
        trace_loop("...\n.F.\n...\n")


def test_loop_leaving_map():
    with pytest.raises(ValueError):
        trace_loop("S-.\n...\n")


def test_broken_pipe():
    with pytest.raises(ValueError):
        trace_loop(".|.\n.S.\n...\n")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SQUARE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(farthest_distance(SQUARE)),
        str(enclosed_tiles(SQUARE)),
    ]