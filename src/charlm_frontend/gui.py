# charlm_frontend/gui.py
# CustomTkinter front end: pick a corpus (file, folder or ZIP), train on a
# worker thread, then extend seed text with the trained model.

from __future__ import annotations
import os
import shutil
import threading
import zipfile
import tempfile
from pathlib import Path
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from charlm.config import DEFAULT_TEXT_LENGTH, DEFAULT_WINDOW_LENGTH
from charlm.engine import LanguageModel
import charlm_frontend as api

PAD = {"padx": 12, "pady": 6}


def shorten_path(p: str, max_chars: int = 60) -> str:
    """Keep the file name, elide the middle of the directory part."""
    if len(p) <= max_chars:
        return p
    name = os.path.basename(p)
    if len(name) + 4 >= max_chars:
        return "..." + p[-(max_chars - 3):]
    return f"{p[:max_chars - len(name) - 4]}.../{name}"


def safe_extract_zip(zip_path: str, dest_dir: str) -> str:
    """Unpack a corpus archive into dest_dir; refuse members that resolve outside it."""
    dest = Path(dest_dir).resolve()
    with zipfile.ZipFile(zip_path) as zf:
        bad = [n for n in zf.namelist() if not (dest / n).resolve().is_relative_to(dest)]
        if bad:
            raise RuntimeError(f"Unsafe zip entry: {bad[0]!r}")
        zf.extractall(dest)
    return str(dest)


def parse_int(text: str, default: int, minimum: int) -> int:
    """Entry text -> int, falling back to default; never below minimum."""
    try:
        value = int(text.strip())
    except ValueError:
        return default
    return max(minimum, value)


class CharLMApp(ctk.CTk):
    """Train-then-generate window."""

    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("dark")
        self.title("Character Language Model")
        self.geometry("900x620")

        self._model: Optional[LanguageModel] = None
        self._worker: Optional[threading.Thread] = None
        self._unzipped: Optional[str] = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=3)
        self.grid_rowconfigure(3, weight=1)

        self._build_corpus_row()
        self._build_seed_row()
        self.txt_output = self._textbox(row=2, font=ctk.CTkFont(family="Menlo, Consolas, Courier New", size=13))
        self.txt_log = self._textbox(row=3, font=ctk.CTkFont(size=12))

        self._show("(train a model, then generate)")
        self._log("Choose a file, folder or ZIP to train on.")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- layout ---------

    def _panel(self, row: int) -> ctk.CTkFrame:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=row, column=0, sticky="nsew", **PAD)
        return frame

    def _textbox(self, row: int, font: ctk.CTkFont) -> ctk.CTkTextbox:
        box = ctk.CTkTextbox(self._panel(row), wrap="word", font=font)
        box.master.grid_columnconfigure(0, weight=1)
        box.master.grid_rowconfigure(0, weight=1)
        box.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)
        return box

    def _build_corpus_row(self) -> None:
        bar = self._panel(0)
        sources = (("File…", self._choose_file), ("Folder…", self._choose_folder), ("ZIP…", self._choose_zip))
        for col, (label, cmd) in enumerate(sources):
            ctk.CTkButton(bar, text=label, width=80, command=cmd).grid(row=0, column=col, padx=4, pady=8)

        ctk.CTkLabel(bar, text="L =").grid(row=0, column=3, padx=(12, 2))
        self.entry_window = ctk.CTkEntry(bar, width=44)
        self.entry_window.insert(0, str(DEFAULT_WINDOW_LENGTH))
        self.entry_window.grid(row=0, column=4)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", width=120)
        self.progress.grid(row=0, column=5, padx=12)
        self.lbl_status = ctk.CTkLabel(bar, text="untrained", anchor="w")
        self.lbl_status.grid(row=0, column=6, sticky="w")
        bar.grid_columnconfigure(6, weight=1)

    def _build_seed_row(self) -> None:
        bar = self._panel(1)
        bar.grid_columnconfigure(0, weight=1)
        self.entry_seed = ctk.CTkEntry(bar, placeholder_text="seed text")
        self.entry_seed.grid(row=0, column=0, sticky="ew", padx=(8, 4), pady=8)
        self.entry_seed.bind("<Return>", lambda _ev: self._do_generate())
        self.entry_length = ctk.CTkEntry(bar, width=64)
        self.entry_length.insert(0, str(DEFAULT_TEXT_LENGTH))
        self.entry_length.grid(row=0, column=1, padx=4)
        ctk.CTkButton(bar, text="Generate", command=self._do_generate).grid(row=0, column=2, padx=(4, 8))

    # --------- training ---------

    def _choose_file(self) -> None:
        self._start_training(fd.askopenfilename(title="Corpus file", filetypes=[("Text", "*.txt"), ("All", "*.*")]))

    def _choose_folder(self) -> None:
        self._start_training(fd.askdirectory(title="Corpus folder"))

    def _choose_zip(self) -> None:
        self._start_training(fd.askopenfilename(title="Corpus ZIP", filetypes=[("ZIP", "*.zip")]), zipped=True)

    def _start_training(self, source: str, zipped: bool = False) -> None:
        if not source:
            return
        if self._worker and self._worker.is_alive():
            mb.showinfo("Training", "Still training the previous corpus.")
            return
        self._drop_unzipped()
        window = parse_int(self.entry_window.get(), DEFAULT_WINDOW_LENGTH, 1)
        self.lbl_status.configure(text=f"training L={window} on {shorten_path(source, 40)}")
        self.progress.start()
        self._worker = threading.Thread(target=self._train, args=(source, window, zipped), daemon=True)
        self._worker.start()

    def _train(self, source: str, window: int, zipped: bool) -> None:
        try:
            if zipped:
                self._unzipped = tempfile.mkdtemp(prefix="charlm_corpus_")
                source = safe_extract_zip(source, self._unzipped)
            model = api.initialize([source], window_length=window)
        except Exception as exc:
            self.after(0, lambda e=exc: self._trained(None, e))
            return
        self.after(0, lambda: self._trained(model, None))

    def _trained(self, model: Optional[LanguageModel], exc: Optional[Exception]) -> None:
        self.progress.stop()
        if model is None:
            self.lbl_status.configure(text="training failed")
            self._log(f"ERROR: {exc!r}")
            mb.showerror("Training error", str(exc))
            return
        self._model = model
        self.lbl_status.configure(text=f"{len(model.table):,} windows, L={model.window_length}")
        self._log(f"Model ready ({len(model.table)} windows).")
        self.entry_seed.focus_set()

    # --------- generation ---------

    def _do_generate(self) -> None:
        if self._model is None:
            self._log("Train a model first.")
            return
        seed = self.entry_seed.get()
        length = parse_int(self.entry_length.get(), DEFAULT_TEXT_LENGTH, 0)
        text = api.generate(seed, length)
        added = len(text) - len(seed)
        if len(seed) < self._model.window_length:
            self._log(f"Seed shorter than L={self._model.window_length}; nothing generated.")
        elif added < length:
            self._log(f"Stopped after {added} chars: window {text[-self._model.window_length:]!r} never seen.")
        self._show(text)

    def _show(self, text: str) -> None:
        self.txt_output.configure(state="normal")
        self.txt_output.delete("0.0", "end")
        self.txt_output.insert("end", text)
        self.txt_output.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _drop_unzipped(self) -> None:
        if self._unzipped:
            shutil.rmtree(self._unzipped, ignore_errors=True)
            self._unzipped = None

    def _on_close(self) -> None:
        self._drop_unzipped()
        self.destroy()


def main() -> int:
    CharLMApp().mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
