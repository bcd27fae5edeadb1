import os

import pytest

from wordle_solver.solver import EmptyWordListError
from wordle_solver.words import default_wordlist_path, load_words, parse_weight


def write(tmp_path, text):
    path = tmp_path / "words.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_plain_list_is_filtered_and_deduplicated(tmp_path):
    path = write(tmp_path, "Apple\ncrane\ntoolong\nab1de\n\nfour\napple\n  slate  \n")
    words, priors = load_words(path)
    assert words == ["apple", "crane", "slate"]
    assert priors == {"apple": 1.0, "crane": 1.0, "slate": 1.0}


def test_weights_become_log_priors(tmp_path):
    path = write(tmp_path, "crane,1000\nslate,abc\ntrace,\nirate,-5\nroate,0\nstare, 100 \n")
    words, priors = load_words(path)
    assert words == ["crane", "slate", "trace", "irate", "roate", "stare"]
    assert priors["crane"] == pytest.approx(3.0)
    assert priors["stare"] == pytest.approx(2.0)
    for word in ("slate", "trace", "irate", "roate"):
        assert priors[word] == pytest.approx(1.0)


@pytest.mark.parametrize("text, expected", [
    ("113.14", 113.14),
    ("nan", 10.0),
    ("inf", 10.0),
    ("", 10.0),
])
def test_parse_weight(text, expected):
    assert parse_weight(text) == pytest.approx(expected)


def test_empty_list_is_an_error(tmp_path):
    path = write(tmp_path, "a\nbb\ntoolong\n")
    with pytest.raises(EmptyWordListError):
        load_words(path)
    with pytest.raises(ValueError):
        load_words(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(str(tmp_path / "nope.txt"))


def test_bundled_list():
    assert os.path.isfile(default_wordlist_path())
    words, _ = load_words(default_wordlist_path())
    assert len(words) > 100
    assert all(len(w) == 5 and w.isalpha() and w.islower() for w in words)
