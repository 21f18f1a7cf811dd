"""Navigation header shared by every page."""

from __future__ import annotations

from functools import cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("Annotate", "/annotate"),
)


@cache
def get_environment() -> Environment:
    """Return the Jinja2 environment for the packaged page templates."""

    env = Environment(
        loader=PackageLoader("annotator_backend", "web/templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.globals["nav_links"] = NAV_LINKS
    return env


def render_header() -> str:
    """Render the navigation bar. Takes no input and always yields the same markup."""

    return get_environment().get_template("header.html").render()
