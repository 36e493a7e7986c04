"""Icon catalog for the service icon picker.

Icons are Lucide names, the set rendered by ``rx.icon``. A service stores
its icon as an opaque string; anything unusable renders as ``globe``.
"""

from typing import List, Optional

from reflex.components.lucide.icon import LUCIDE_ICON_LIST

DEFAULT_SYMBOL = "globe"

# Catalog names use underscores, rx.icon accepts dashes
_KNOWN_SYMBOLS = frozenset(LUCIDE_ICON_LIST)

POPULAR_SYMBOLS = [
    "globe", "zap", "server", "cloud", "lock", "key",
    "radio-tower", "network", "wifi", "router",
    "laptop", "monitor", "tv", "terminal", "link",
    "box", "package", "archive",
    "layout-grid", "grid-2x2", "layers",
    "settings", "wrench", "hammer",
    "send", "bookmark", "file-text", "folder",
    "shield", "badge-check", "triangle-alert",
    "power", "circle-play", "circle-pause", "circle-stop",
    "bell", "bell-ring", "clock",
]


def is_valid_symbol(name: Optional[str]) -> bool:
    """Check that a name is an icon rx.icon can draw."""
    if not name or name != name.lower():
        return False
    return name.replace("-", "_") in _KNOWN_SYMBOLS


def resolve_symbol(name: Optional[str]) -> str:
    """Icon to render for a stored symbol name."""
    name = (name or "").strip()
    if is_valid_symbol(name):
        return name
    return DEFAULT_SYMBOL


def filter_symbols(query: str) -> List[str]:
    """Popular icons containing the query, ignoring case."""
    query = (query or "").strip().casefold()
    if not query:
        return list(POPULAR_SYMBOLS)
    return [symbol for symbol in POPULAR_SYMBOLS if query in symbol.casefold()]


def custom_symbol(query: str) -> Optional[str]:
    """A searched name not in the popular list, offered as a custom icon."""
    name = (query or "").strip()
    if not is_valid_symbol(name) or name in POPULAR_SYMBOLS:
        return None
    return name
