"""Terminal message helpers for the PALISADE CLI.

Messages go to stderr so stdout stays free for machine-readable output. Each
line starts with an emoji, or an ASCII marker when stderr cannot encode it.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _glyph(pair: tuple[str, str]) -> str:
    """Return the emoji from `pair` if stderr can encode it, else the fallback."""
    emoji, fallback = pair
    encoding = getattr(click.get_text_stream("stderr"), "encoding")
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def caution_glyph() -> str:
    """Warning marker: "⚠️" or "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Success marker: "✅" or "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Error marker: "❌" or "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
