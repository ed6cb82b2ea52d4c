"""OSC-8 hyperlink rendering with a plain-text fallback."""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check whether `stream` (default stdout) renders OSC-8 links.

    Non-TTY streams never do. Otherwise a small allowlist of terminal
    identifiers from the environment decides.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINALS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str) -> str:
    """Wrap `url` in OSC-8 escapes when supported, else return it unchanged."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
