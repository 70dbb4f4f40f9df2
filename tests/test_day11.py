import pytest

from aoc2023.day11 import find_galaxies, galaxy_distance_sum, main

EXAMPLE = (
    "...#......\n"
    ".......#..\n"
    "#.........\n"
    "..........\n"
    "......#...\n"
    ".#........\n"
    ".........#\n"
    "..........\n"
    ".......#..\n"
    "#...#.....\n"
)


def test_find_galaxies():
    assert find_galaxies("#.\n.#\n") == [(0, 0), (1, 1)]


def test_example_default_expansion():
    assert galaxy_distance_sum(EXAMPLE) == 374


def test_unexpanded_is_plain_manhattan():
    galaxies = find_galaxies(EXAMPLE)
    plain = sum(
        abs(a[0] - b[0]) + abs(a[1] - b[1])
        for i, a in enumerate(galaxies)
        for b in galaxies[i + 1:]
    )
    assert galaxy_distance_sum(EXAMPLE, 1) == plain


def test_distance_grows_linearly():
    one = galaxy_distance_sum(EXAMPLE, 1)
    two = galaxy_distance_sum(EXAMPLE, 2)
    big = galaxy_distance_sum(EXAMPLE, 1_000_000)
    assert big - one == (two - one) * 999_999


def test_no_empty_lines_ignores_expansion():
    text = "#.\n.#\n"
    assert galaxy_distance_sum(text, 2) == galaxy_distance_sum(text, 1000)


def test_single_galaxy():
    assert galaxy_distance_sum("...\n.#.\n...\n", 1_000_000) == 0


def test_empty_image():
    with pytest.raises(ValueError):
        galaxy_distance_sum("")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.split() == [
        str(galaxy_distance_sum(EXAMPLE, 2)),
        str(galaxy_distance_sum(EXAMPLE, 1_000_000)),
    ]