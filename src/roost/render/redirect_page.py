"""Built-in redirect page.

Redirects are materialized as real HTML files so plain static hosting
works without server-side rewrite rules. The page redirects with a meta
refresh, again from a script, and finally offers a link.

The target is substituted verbatim; no escaping is applied. Callers
that build redirects from untrusted input must sanitize targets first.
"""

from functools import cache

from kida import Environment

REDIRECT_PAGE_SOURCE = """\
<!DOCTYPE HTML>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="0; url={{ target }}">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Page Redirection</title>
</head>
<body>
    <script>
        window.location.replace("{{ target }}");
    </script>

    <p>Redirecting to <a href="{{ target }}">{{ target }}</a>...</p>
</body>
</html>"""


@cache
def _redirect_template():
    # Autoescape off: the target must appear exactly as registered.
    env = Environment(autoescape=False)
    return env.from_string(REDIRECT_PAGE_SOURCE)


def render_redirect_page(target: str) -> str:
    """Render the default redirect document pointing at ``target``."""
    return _redirect_template().render({"target": target})
