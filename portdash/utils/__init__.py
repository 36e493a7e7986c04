"""Utility functions for PortDash."""

from .collation import collation_key, names_equal
from .urls import (
    build_url,
    can_add_service,
    can_open,
    can_save_service,
    effective_host,
    effective_scheme,
    parse_port,
    preview_label,
)
from .symbols import DEFAULT_SYMBOL, POPULAR_SYMBOLS, resolve_symbol, filter_symbols, custom_symbol

__all__ = [
    "collation_key",
    "names_equal",
    "build_url",
    "can_add_service",
    "can_open",
    "can_save_service",
    "effective_host",
    "effective_scheme",
    "parse_port",
    "preview_label",
    "DEFAULT_SYMBOL",
    "POPULAR_SYMBOLS",
    "resolve_symbol",
    "filter_symbols",
    "custom_symbol",
]
