from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from charlm.engine import LanguageModel
from charlm.config import DEFAULT_TEXT_LENGTH, DEFAULT_WINDOW_LENGTH, MAX_TEXT_LENGTH

app = Flask(__name__)
_model: LanguageModel | None = None

# ---------- API ----------
@app.get("/api/generate")
def api_generate():
    if _model is None or not _model.is_trained:
        return jsonify({"error": "model not loaded"}), 503
    seed = request.args.get("seed", "", type=str)
    n = request.args.get("n", DEFAULT_TEXT_LENGTH, type=int)
    n = max(0, min(MAX_TEXT_LENGTH, n))
    text = _model.generate(seed, n)
    return jsonify({
        "seed": seed,
        "text": text,
        "generated": len(text) - len(seed),
        "window_length": _model.window_length,
    })

@app.get("/api/health")
def api_health():
    trained = _model is not None and _model.is_trained
    return jsonify({"ok": True, "trained": trained, "windows": len(_model.table) if trained else 0})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Char LM • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); }
#seed{ flex:1; min-width:240px }
#n{ width:90px }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
pre{ white-space:pre-wrap; margin-top:16px; padding:14px; border:1px solid var(--border); border-radius:12px;
  font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
.seed{ color:var(--accent) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Character language model</h1>
      <form id="f" class="controls">
        <input id="seed" type="text" placeholder="Seed text…" autocomplete="off" autofocus />
        <input id="n" type="number" min="0" max="10000" value="200" />
        <button class="btn" type="submit">Generate</button>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <pre id="out"></pre>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
function esc(s){ return s.replace(/[&<>]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c])); }
$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const seed = $("#seed").value, n = parseInt($("#n").value || "200", 10);
  try{
    const resp = await fetch(`/api/generate?seed=${encodeURIComponent(seed)}&n=${n}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    $("#stats").textContent = `Generated ${data.generated} chars (L=${data.window_length})`;
    $("#out").innerHTML = `<span class="seed">${esc(data.seed)}</span>${esc(data.text.slice(data.seed.length))}`;
  }catch(e){ $("#stats").textContent = `Error: ${e.message}`; }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of LanguageModel")
    ap.add_argument("--corpus", nargs="+", required=True)
    ap.add_argument("--window", type=int, default=DEFAULT_WINDOW_LENGTH)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _model
    _model = LanguageModel(args.window, args.seed, verbose=args.verbose)
    _model.train_files(args.corpus)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
