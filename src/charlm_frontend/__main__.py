from __future__ import annotations
import argparse, sys, json
from charlm import LanguageModel
from charlm.config import DEFAULT_TEXT_LENGTH, DEFAULT_WINDOW_LENGTH
from charlm.errors import CharLMError

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Character-level Markov text generator")
    p.add_argument("--corpus", nargs="+", required=True, help="Text files or folders of .txt")
    p.add_argument("--window", type=int, default=DEFAULT_WINDOW_LENGTH, help="Window length L")
    p.add_argument("--seed", type=int, default=None, help="Random seed (reproducible output)")
    p.add_argument("--text", default=None, help="Seed text to extend once")
    p.add_argument("-n", "--length", type=int, default=DEFAULT_TEXT_LENGTH, help="Characters to generate")
    p.add_argument("--repl", action="store_true", help="Interactive loop after training")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--dump", action="store_true", help="Print the window table (debug)")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.window < 1:
        p.error("--window must be >= 1")
    if args.length < 0:
        p.error("--length must be >= 0")

    try:
        model = LanguageModel(args.window, args.seed, verbose=args.verbose)
        model.train_files(args.corpus)
    except (CharLMError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.dump:
        sys.stdout.write(model.dump())

    def run_once(seed_text: str):
        text = model.generate(seed_text, args.length)
        if args.json:
            row = {"seed": seed_text, "text": text, "generated": len(text) - len(seed_text)}
            print(json.dumps(row, ensure_ascii=False))
        else:
            print(text)

    if args.text is not None:
        run_once(args.text)

    if args.repl:
        print(f"Type seed text (at least {args.window} chars), empty line to exit.")
        while True:
            try:
                q = input("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            run_once(q)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
