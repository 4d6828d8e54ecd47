# src/e2e/test_frontend_api.py

import zipfile
from pathlib import Path

import pytest

import charlm_frontend as api


@pytest.mark.e2e
def test_initialize_then_generate(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(api, "_model", None)
    root = tmp_path / "Archive"; root.mkdir()
    (root / "x.txt").write_text("abcabcabc", encoding="utf-8")
    model = api.initialize([str(root)], window_length=3, seed=2)
    assert api.current() is model
    assert api.generate("abc", 3) == "abcabc"


def test_generate_before_initialize(monkeypatch):
    monkeypatch.setattr(api, "_model", None)
    with pytest.raises(RuntimeError):
        api.generate("abc")


# ---------- GUI helpers (need tkinter + customtkinter importable) ----------

@pytest.fixture
def gui():
    pytest.importorskip("tkinter")
    pytest.importorskip("customtkinter")
    import charlm_frontend.gui as gui_mod
    return gui_mod


def test_shorten_path(gui):
    assert gui.shorten_path("short") == "short"
    long = "/very/long/" + "x" * 100 + "/corpus.txt"
    out = gui.shorten_path(long, max_chars=40)
    assert "..." in out and len(out) <= 40
    assert out.endswith("/corpus.txt")


def test_parse_int(gui):
    assert gui.parse_int(" 7 ", 3, 1) == 7
    assert gui.parse_int("oops", 3, 1) == 3
    assert gui.parse_int("-5", 3, 0) == 0


def test_safe_extract_zip_rejects_traversal(gui, tmp_path: Path):
    bad = tmp_path / "bad.zip"
    with zipfile.ZipFile(bad, "w") as zf:
        zf.writestr("../evil.txt", "x")
    with pytest.raises(RuntimeError):
        gui.safe_extract_zip(str(bad), str(tmp_path / "out"))


def test_safe_extract_zip_then_train(gui, tmp_path: Path, monkeypatch):
    monkeypatch.setattr(api, "_model", None)
    good = tmp_path / "good.zip"
    with zipfile.ZipFile(good, "w") as zf:
        zf.writestr("texts/a.txt", "abcabcabc")
    dest = tmp_path / "out"
    gui.safe_extract_zip(str(good), str(dest))
    model = api.initialize([str(dest)], window_length=3, seed=0)
    assert model.generate("abc", 3) == "abcabc"
