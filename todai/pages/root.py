"""Root landing page for the todAI API with endpoint overview and docs links."""

from html import escape

_ENDPOINTS: tuple[tuple[str, str, str], ...] = (
    ("GET", "/api/tasks", "List tasks, newest first"),
    ("GET", "/api/tasks/{id}", "Get one task"),
    ("POST", "/api/tasks", "Create a task"),
    ("PUT", "/api/tasks/{id}", "Update a task (partial)"),
    ("DELETE", "/api/tasks/{id}", "Delete a task"),
    ("GET", "/api/health", "Liveness"),
)


def render_root_page(app_name: str, persistence: bool) -> str:
    """Return HTML for the root landing page."""
    rows = "\n".join(
        f"<tr><td class=\"m\">{method}</td><td><code>{escape(path)}</code></td><td>{escape(text)}</td></tr>"
        for method, path, text in _ENDPOINTS
    )
    store = "connected" if persistence else "not configured (requests will fail with 500)"
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(app_name)}</title>
    <style>
        body {{ font-family: system-ui, sans-serif; margin: 0; padding: 2rem 1rem; background: #fafafa; color: #222; }}
        .wrap {{ max-width: 640px; margin: 0 auto; }}
        h1 {{ margin: 0 0 0.25rem 0; }}
        .tagline {{ color: #666; margin: 0 0 2rem 0; }}
        table {{ border-collapse: collapse; width: 100%; margin-bottom: 1.5rem; }}
        td {{ padding: 0.4rem 0.5rem; border-bottom: 1px solid #e5e5e5; font-size: 0.9375rem; }}
        td.m {{ font-weight: 600; width: 4.5rem; }}
        .code {{ font-family: monospace; background: #f0f0f0; padding: 0.6rem 0.85rem; margin: 0.5rem 0 1rem 0; }}
        a.btn {{ display: inline-block; padding: 0.5rem 1rem; margin-right: 0.5rem; background: #1976d2; color: #fff; text-decoration: none; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{escape(app_name)}</h1>
        <p class="tagline">Task manager API. Task store: {escape(store)}.</p>
        <table>
{rows}
        </table>
        <p>Start the console client with:</p>
        <div class="code">todai --base-url http://localhost:5000/api</div>
        <a href="/docs" class="btn">API docs (Swagger)</a>
        <a href="/redoc" class="btn">ReDoc</a>
    </div>
</body>
</html>
""".strip()
