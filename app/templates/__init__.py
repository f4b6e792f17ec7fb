"""Template rendering utilities."""

from deps import Dict, List, Optional, Tuple, html

from energy_checker.issue import Issue
from energy_checker.utils import split_lines

from ..services.presentation import DECORATION_COLORS

_STYLE = """
  body { font-family: system-ui, sans-serif; max-width: 48rem; margin: 2rem auto; padding: 0 1rem; }
  h1 { font-size: 1.25rem; font-weight: 600; }
  ul { list-style: none; padding: 0; }
  li { margin: 0.5rem 0; }
  a { color: #2563eb; text-decoration: none; }
  a:hover { text-decoration: underline; }
  textarea { width: 100%; min-height: 16rem; font-family: ui-monospace, monospace; font-size: 0.8125rem; }
  button { padding: 0.5rem 1rem; font-size: 0.9375rem; background: #2563eb; color: white; border: none; border-radius: 0.375rem; cursor: pointer; }
  button:hover { background: #1d4ed8; }
  .form-error { color: #dc2626; margin: 1rem 0; padding: 0.75rem; background: #fef2f2; border-radius: 0.375rem; }
  .issue { margin: 1rem 0; padding: 0.75rem; background: #f8fafc; border-radius: 0.375rem; border-left: 4px solid #94a3b8; }
  .issue-meta { font-size: 0.8125rem; color: #64748b; margin-bottom: 0.25rem; }
  .issue-msg { font-weight: 500; margin-bottom: 0.25rem; }
  .issue-fix { font-family: ui-monospace, monospace; font-size: 0.8125rem; white-space: pre-wrap; }
  pre { background: #f1f5f9; padding: 1rem; border-radius: 0.375rem; overflow-x: auto; font-size: 0.8125rem; }
  .hl { border-radius: 3px; }
"""

_NAV = (
    '<p><a href="/">Home</a> · <a href="/review">Review</a> · <a href="/docs">Swagger UI</a>'
    ' · <a href="/redoc">ReDoc</a> · <a href="/health">Health</a></p>'
)

_ROOT_CONTENT = """
  <h1>C/C++ Energy Checker API</h1>
  <p>Endpoints:</p>
  <ul>
    <li><a href="/review">/review</a> — Form: paste C/C++ code, view highlighted results</li>
    <li><a href="/docs">/docs</a> — Swagger UI</li>
    <li><a href="/redoc">/redoc</a> — ReDoc</li>
    <li><a href="/health">/health</a> — Liveness</li>
    <li><a href="/check">/check</a> — Usage (POST)</li>
    <li><a href="/analyze">/analyze</a> — Usage (POST)</li>
  </ul>
  <p>Editors can track a document with <code>PUT /documents/{doc_id}</code>; it is rescanned once edits settle.</p>
"""

_CHECK_CONTENT = """
  <h1>POST /check</h1>
  <p>Rules-only analysis (no AI). Send JSON: <code>{"code": "...", "language": "cpp"}</code> or <code>{"file_path": "/path/to/file.cpp"}</code>.</p>
"""

_ANALYZE_CONTENT = """
  <h1>POST /analyze</h1>
  <p>Send a JSON body for full analysis (rules + AI fix suggestions).</p>
  <ul>
    <li><strong>Option A:</strong> <code>{"code": "...", "language": "cpp"}</code></li>
    <li><strong>Option B:</strong> <code>{"file_path": "/absolute/path/to/main.cpp"}</code></li>
  </ul>
"""


def render_page(title: str, content: str) -> str:
    """Wrap content in the shared page layout."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{html.escape(title)}</title>
  <style>{_STYLE}{_severity_styles()}</style>
</head>
<body>
{content}
  {_NAV}
</body>
</html>
"""


def _severity_styles() -> str:
    rules = []
    for severity, color in DECORATION_COLORS.items():
        rules.append(f"  .hl.{severity.value} {{ border: 1px solid {color}; }}")
        rules.append(f"  .issue.{severity.value} {{ border-left-color: {color}; }}")
    return "\n".join(rules) + "\n"


def render_root() -> str:
    return render_page("C/C++ Energy Checker API", _ROOT_CONTENT)


def render_check_usage() -> str:
    return render_page("Check", _CHECK_CONTENT)


def render_analyze_usage() -> str:
    return render_page("Analyze", _ANALYZE_CONTENT)


def render_review_form(error: Optional[str] = None, value: str = "") -> str:
    err_block = f'<div class="form-error">{html.escape(error)}</div>' if error else ""
    content = f"""
  <h1>Review C/C++ code for energy issues</h1>
  {err_block}
  <form method="post" action="/review">
    <textarea name="code" placeholder="int* p = new int[10];" required>{html.escape(value)}</textarea>
    <p><button type="submit">Analyze</button></p>
  </form>
"""
    return render_page("Review", content)


def _highlight_line(text: str, spans: List[Tuple[int, int, str]]) -> str:
    """Escape text, wrapping each non-overlapping span in a severity highlight."""
    esc = html.escape
    out = []
    pos = 0
    for start, end, severity in sorted(spans):
        start = max(start, pos)
        end = min(end, len(text))
        if start >= end:
            continue
        out.append(esc(text[pos:start]))
        out.append(f'<span class="hl {severity}">{esc(text[start:end])}</span>')
        pos = end
    out.append(esc(text[pos:]))
    return "".join(out)


def render_review_results(code: str, issues: List[Issue]) -> str:
    esc = html.escape
    spans_by_line: Dict[int, List[Tuple[int, int, str]]] = {}
    for i in issues:
        spans_by_line.setdefault(i.line, []).append((i.column, i.end_column, i.severity.value))
    source = "\n".join(
        _highlight_line(text, spans_by_line.get(n, []))
        for n, text in enumerate(split_lines(code))
    )

    issues_block = ""
    for i in issues:
        issues_block += f"""
  <div class="issue {i.severity.value}">
    <div class="issue-meta">Line {i.line + 1} · {esc(i.category)} · {esc(i.severity.value)} · Score {i.score}/10</div>
    <div class="issue-msg">{esc(i.message)}</div>
    <div class="issue-fix">Fix: {esc(i.suggestion)}</div>
  </div>"""

    content = f"""
  <h1>Results</h1>
  <p><strong>{len(issues)}</strong> issue(s) found.</p>
  <pre>{source}</pre>
  {issues_block if issues_block else "<p>No issues found.</p>"}
  <p><a href="/review">Review more code</a></p>
"""
    return render_page("Results", content)
