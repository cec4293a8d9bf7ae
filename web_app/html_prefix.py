"""HTML path-prefix rewriting for proxy (X-Forwarded-Prefix). No app imports to avoid circular deps."""

import json
import re

# Placeholder line in ux/web/admin.html
BASE_PATH_DECLARATION = 'const BASE_PATH = "";'

_SAFE_PREFIX = re.compile(r"^(/[A-Za-z0-9._~-]+)+$")


def inject_forwarded_prefix_into_html(html: str, path_prefix: str) -> str:
    """Point the admin page's links and API calls below path_prefix.

    Prefix should be normalized (leading slash, no trailing). Prefixes with
    characters outside the unreserved URL set are ignored.
    """
    if not path_prefix or not _SAFE_PREFIX.match(path_prefix):
        return html
    return html.replace(BASE_PATH_DECLARATION, f"const BASE_PATH = {json.dumps(path_prefix)};")
