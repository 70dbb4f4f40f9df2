import pytest

from aoc2023.day01 import DIGIT_WORDS, calibration_sum, main, parse_line


def test_plain_digits_example():
    assert parse_line("1abc2") == 12


def test_spelled_digits_example():
    assert parse_line("two1nine") == 29


def test_overlapping_words_share_letters():
    assert parse_line("eightwo") == 82


def test_line_without_digits_is_none():
    assert parse_line("abcdef") is None
    assert parse_line("") is None


@pytest.mark.parametrize("word,digit", sorted(DIGIT_WORDS.items()))
def test_spelled_word_equals_written_digit(word, digit):
    assert parse_line(f"x{word}y") == parse_line(f"x{digit}y")


@pytest.mark.parametrize("line", ["1abc2", "pqr3stu8vwx", "xtwone3four", "7pqrstsixteen"])
def test_surrounding_noise_does_not_change_value(line):
    assert parse_line("qq" + line + "zz") == parse_line(line)


def test_single_digit_is_doubled_digit():
    for digit in range(1, 10):
        assert parse_line(f"ab{digit}cd") == parse_line(f"{digit}{digit}")


def test_sum_is_sum_of_lines_skipping_empty_ones():
    lines = ["two1nine", "nothing", "abcone2threexyz", "4nineeightseven2"]
    expected = sum(v for v in map(parse_line, lines) if v is not None)
    assert calibration_sum("\n".join(lines)) == expected


def test_sum_of_no_lines_is_zero():
    assert calibration_sum("") == 0
    assert calibration_sum("abc\ndef") == 0


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1abc2\nxyz\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert out.strip() == f"final result {calibration_sum('1abc2')}"