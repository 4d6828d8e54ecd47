# src/e2e/test_trainer.py

import pytest

from charlm.errors import CorpusReadError, InsufficientCorpusError
from charlm.normalize import check_distribution
from charlm.trainer import train

TEXT = (
    "To be, or not to be, that is the question:\n"
    "Whether 'tis nobler in the mind to suffer\n"
    "The slings and arrows of outrageous fortune,\n"
    "Or to take arms against a sea of troubles\n"
)


def test_abcabcabc_gives_three_single_entry_windows():
    t = train("abcabcabc", 3)
    assert t.window_length == 3
    assert set(t.windows) == {"abc", "bca", "cab"}
    for window, nxt in (("abc", "a"), ("bca", "b"), ("cab", "c")):
        d = t.get(window)
        assert d.characters() == [nxt]
        assert d.entries[0].count == 2
        assert d.entries[0].probability == 1.0
        assert d.entries[0].cumulative_probability == 1.0


@pytest.mark.parametrize("L", [1, 2, 3, 5, 8])
def test_every_window_is_normalized(L):
    t = train(TEXT, L)
    assert len(t) > 0
    for window, d in t.items():
        assert len(window) == L
        assert check_distribution(d, tol=1e-9)


def test_counts_add_up_to_corpus_length():
    L = 4
    t = train(TEXT, L)
    assert sum(d.total() for _, d in t.items()) == len(TEXT) - L


def test_accepts_any_character_iterable():
    t = train(iter(list("abab")), 1)
    assert t.get("a").characters() == ["b"]
    assert t.get("b").characters() == ["a"]


def test_too_short_corpus_raises():
    with pytest.raises(InsufficientCorpusError) as ei:
        train("ab", 3)
    assert ei.value.required == 3
    assert ei.value.available == 2


def test_corpus_of_exactly_window_length_trains_nothing():
    t = train("abc", 3)
    assert len(t) == 0


def test_stream_failure_becomes_corpus_read_error():
    def broken():
        yield from "abcdef"
        raise OSError("disk went away")

    with pytest.raises(CorpusReadError) as ei:
        train(broken(), 2)
    assert isinstance(ei.value.__cause__, OSError)


def test_window_length_must_be_positive():
    with pytest.raises(ValueError):
        train("abc", 0)
