# src/e2e/test_window_distribution.py

from charlm.models import CharObservation, NGramTable, WindowDistribution


def test_observe_keeps_first_occurrence_order():
    d = WindowDistribution()
    for ch in "cabbacc":
        d.observe(ch)
    assert d.characters() == ["c", "a", "b"]
    assert [e.count for e in d] == [3, 2, 2]
    assert d.total() == 7
    assert len(d) == 3


def test_observe_returns_the_bumped_entry():
    d = WindowDistribution()
    first = d.observe("x")
    again = d.observe("x")
    assert first is again
    assert again.count == 2


def test_lookup_and_membership():
    d = WindowDistribution()
    d.observe("q")
    assert "q" in d
    assert "z" not in d
    assert d.get("q").count == 1
    assert d.get("z") is None


def test_new_observation_has_no_probability_yet():
    obs = CharObservation("a")
    assert obs.count == 1
    assert obs.probability == 0.0
    assert obs.cumulative_probability == 0.0


def test_table_dump_lists_every_window():
    d = WindowDistribution()
    d.observe("a")
    t = NGramTable(window_length=2, windows={"xy": d})
    assert "xy" in t and "zz" not in t
    assert len(t) == 1
    assert t.dump() == "xy : ((a 1 0.0 0.0))\n"
