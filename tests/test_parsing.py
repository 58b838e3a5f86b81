import shlex

import pytest

from pipexpy.parsing import is_blank, parse_cmd


@pytest.mark.parametrize("text", ["", " ", "\t\n  \r", "\v\f"])
def test_is_blank_true_for_whitespace(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["a", "  x  ", "\t-\n"])
def test_is_blank_false_with_content(text):
    assert is_blank(text) is False


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_input_has_no_arguments(text):
    assert parse_cmd(text) == []


@pytest.mark.parametrize("text", ["ls -l  -a", "  wc   -l  ", "cat\tfile\nmore"])
def test_unquoted_matches_whitespace_split(text):
    assert parse_cmd(text) == text.split()


@pytest.mark.parametrize(
    "words",
    [
        ["grep", "hello world"],
        ["awk", "{print $1}"],
        ["echo", "it's"],
        ["sed", 's/"a"/b/'],
        ["printf", ""],
        ["tr", "a b", "c\td"],
    ],
)
def test_shell_quoted_words_round_trip(words):
    assert parse_cmd(" ".join(shlex.quote(word) for word in words)) == words


def test_double_quotes_group_words():
    words = ["cut", "-d", " ", "-f", "1"]
    assert parse_cmd('cut -d " " -f 1') == words


def test_backslash_escapes_space():
    assert parse_cmd(r"echo a\ b") == ["echo", "a b"]


def test_backslash_literal_inside_single_quotes():
    assert parse_cmd(r"'a\b'") == ["a\\b"]


def test_backslash_escapes_quote_inside_double_quotes():
    assert parse_cmd(r'"say \"hi\""') == parse_cmd("""'say "hi"'""")


def test_unterminated_quote_runs_to_end():
    assert parse_cmd("awk '{print $1") == ["awk", "{print $1"]


def test_trailing_backslash_is_dropped():
    assert parse_cmd("cat a\\") == parse_cmd("cat a")


def test_other_quote_is_literal_inside_quotes():
    parsed = parse_cmd("\"it's\"")
    assert len(parsed) == 1
    assert "'" in parsed[0]
    assert '"' not in parsed[0]


def test_adjacent_quoted_parts_join():
    assert parse_cmd("'ab'\"cd\"ef") == [parse_cmd("abcdef")[0]]