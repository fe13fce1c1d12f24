"""Pure rendering functions: resolved photos -> post text.

All renderers follow the same pattern:
  - Input: reference records / ResolvedAsset
  - Output: str (plain text, at most ``MAX_POST_LENGTH`` characters)
  - No side effects, no I/O, no Prefect decorators

Used by flows/post.py.

Public API:
  - post: build_bird_post, build_mammal_post, PostTooLongError

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.txt.j2", ...)``.
2. Create the template in ``templates/{name}.txt.j2``.
3. Add tests: call the build function with sample records and assert on the
   returned text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers. Output is plain text, not HTML.
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
