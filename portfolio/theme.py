"""
Theme handling for the portfolio page.

The page has exactly two display modes. Everything that changes colour with
the mode goes through ``style_for(mode, role)`` so no element keeps its own
idea of the current theme.

- ThemeMode / DEFAULT_MODE      -> the two-value flag (fresh load = dark)
- toggle_mode / parse_mode      -> pure helpers
- ThemeController               -> state object owned by the page
- RootFlag                      -> the <html class="dark"> flag, kept in sync
- style_for / style_table       -> class tokens per (mode, role)
- toggle_label / toggle_icon    -> toggle affordance
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, List, Tuple

from .errors import InvalidThemeError, UnknownRoleError

logger = logging.getLogger(__name__)


class ThemeMode(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"

    def __str__(self) -> str:
        return self.value


DEFAULT_MODE = ThemeMode.DARK


def toggle_mode(mode: ThemeMode) -> ThemeMode:
    """Return the other mode."""
    return ThemeMode.LIGHT if mode is ThemeMode.DARK else ThemeMode.DARK


def parse_mode(value) -> ThemeMode:
    """Strict parse: 'light' / 'dark' (any case, surrounding spaces ok)."""
    if isinstance(value, ThemeMode):
        return value
    if not isinstance(value, str):
        raise InvalidThemeError(value)
    try:
        return ThemeMode(value.strip().lower())
    except ValueError:
        raise InvalidThemeError(value) from None


def resolve_mode(candidate: str | None, default: ThemeMode = DEFAULT_MODE) -> ThemeMode:
    """Lenient parse for query strings: anything unknown falls back to default."""
    if not candidate:
        return default
    try:
        return parse_mode(candidate)
    except InvalidThemeError:
        logger.debug("ignoring unknown theme %r, using %s", candidate, default)
        return default


# ---------------- state ----------------

class RootFlag:
    """The document-root dark flag (``<html class="dark">``)."""

    def __init__(self) -> None:
        self.dark = False

    def sync(self, mode: ThemeMode) -> None:
        self.dark = mode is ThemeMode.DARK

    def css_class(self) -> str:
        return "dark" if self.dark else ""


class ThemeController:
    """
    Holds the current mode and notifies listeners on every change.

    A listener is called once right away with the current mode and then after
    each toggle, which is how the root flag stays in step with the mode.
    """

    def __init__(self, mode: ThemeMode = DEFAULT_MODE, root: RootFlag | None = None):
        self._mode = parse_mode(mode)
        self._listeners: List[Callable[[ThemeMode], None]] = []
        self.root = root if root is not None else RootFlag()
        self.subscribe(self.root.sync)

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def is_dark(self) -> bool:
        return self._mode is ThemeMode.DARK

    def toggle(self) -> ThemeMode:
        self._mode = toggle_mode(self._mode)
        logger.info("theme switched to %s", self._mode)
        for listener in list(self._listeners):
            listener(self._mode)
        return self._mode

    def subscribe(self, listener: Callable[[ThemeMode], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        listener(self._mode)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


# ---------------- styling ----------------

# role -> (shared tokens, dark tokens, light tokens)
_ROLE_TOKENS: Dict[str, Tuple[str, str, str]] = {
    "page": (
        "min-h-screen transition-colors duration-300",
        "bg-gradient-to-b from-gray-900 to-gray-800 text-white",
        "bg-gradient-to-b from-gray-100 to-white text-gray-900",
    ),
    "heading": ("text-5xl font-bold mb-2", "text-purple-400", "text-purple-600"),
    "tagline": ("text-xl", "text-gray-300", "text-gray-600"),
    "icon_link": (
        "transition-colors duration-300",
        "text-gray-400 hover:text-purple-400",
        "text-gray-600 hover:text-purple-600",
    ),
    "card": (
        "rounded-lg border shadow-sm",
        "bg-gray-800 border-purple-500",
        "bg-white border-purple-200",
    ),
    "card_title": (
        "text-2xl font-semibold leading-none tracking-tight",
        "text-purple-400",
        "text-purple-600",
    ),
    "card_description": ("text-sm", "text-gray-400", "text-gray-500"),
    "body_text": ("", "text-gray-300", "text-gray-600"),
    "item_title": ("font-semibold text-lg", "text-white", "text-gray-800"),
    "muted_text": ("", "text-gray-400", "text-gray-500"),
    "badge": (
        "inline-flex items-center rounded-full px-2.5 py-0.5 text-xs font-semibold "
        "transition-colors duration-300 hover:bg-purple-600 hover:text-white",
        "bg-purple-700 text-white",
        "bg-purple-100 text-purple-800",
    ),
    "link": (
        "transition-colors duration-300 flex items-center",
        "text-purple-400 hover:text-purple-300",
        "text-purple-600 hover:text-purple-500",
    ),
    "footer": ("mt-12 text-center", "text-gray-400", "text-gray-500"),
}

ROLES = tuple(_ROLE_TOKENS)


def style_for(mode: ThemeMode, role: str) -> str:
    """Class tokens for ``role`` under ``mode``, shared tokens first."""
    try:
        shared, dark, light = _ROLE_TOKENS[role]
    except KeyError:
        raise UnknownRoleError(role) from None
    themed = dark if parse_mode(mode) is ThemeMode.DARK else light
    return f"{shared} {themed}".strip()


def style_table() -> Dict[str, Dict[str, str]]:
    """mode -> role -> tokens, embedded in the page for the in-place toggle."""
    return {m.value: {role: style_for(m, role) for role in ROLES} for m in ThemeMode}


def toggle_label(mode: ThemeMode) -> str:
    """aria-label for the toggle button: names the mode a click switches to."""
    return f"Toggle {toggle_mode(parse_mode(mode))} mode"


def toggle_icon(mode: ThemeMode) -> str:
    # sun while dark (click for light), moon while light
    return "sun" if parse_mode(mode) is ThemeMode.DARK else "moon"
