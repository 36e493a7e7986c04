"""URL resolution for services.

A service may override the global host and scheme. Everything here is a
pure function of its arguments and never raises for well-formed input:
a degenerate URL such as ``http://:8080`` is still returned, and callers
use :func:`can_open` to decide whether to hand it to a browser.
"""

import re
from typing import Optional, Union
from urllib.parse import urlsplit

from ..models.app_settings import AppSettings
from ..models.service import Service

PortInput = Union[int, str, None]

# ASCII digits with an optional minus sign, nothing else
_PORT_PATTERN = re.compile(r"-?[0-9]+", re.ASCII)


def parse_port(value: PortInput) -> Optional[int]:
    """Parse form or CLI port input. Returns None when it is not an integer.

    No range check is done here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _PORT_PATTERN.fullmatch(text):
        return None
    return int(text)


def effective_scheme(service: Service, settings: AppSettings) -> str:
    """Scheme for a service; a set override always wins."""
    if service.customUseHTTPS is not None:
        use_https = service.customUseHTTPS
    else:
        use_https = settings.useHTTPS
    return "https" if use_https else "http"


def effective_host(service: Service, settings: AppSettings) -> str:
    """Host for a service; falls back to the default host, even if empty."""
    if service.customHost:
        return service.customHost
    return settings.host


def build_url(service: Service, settings: AppSettings) -> str:
    """Launch URL, e.g. ``http://10.0.0.5:8080``."""
    scheme = effective_scheme(service, settings)
    host = effective_host(service, settings)
    return f"{scheme}://{host}:{service.port}"


def preview_label(
    name: Optional[str],
    port: PortInput,
    host: Optional[str],
    use_https: Optional[bool],
    settings: AppSettings,
) -> str:
    """Label for a service that is still being edited.

    Tolerates a missing or half-typed port: it counts as 0 and is left out
    of the URL.
    """
    port_number = parse_port(port)
    if port_number is None:
        port_number = 0

    name = (name or "").strip() or f"Service :{port_number}"
    host = (host or "").strip() or settings.host
    if use_https is None:
        use_https = settings.useHTTPS

    base = f"{'https' if use_https else 'http'}://{host}"
    if port_number > 0:
        return f"{name} — {base}:{port_number}"
    return f"{name} — {base}"


def can_open(url: str) -> bool:
    """Whether a built URL is usable (http/https with a host)."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def can_add_service(port: PortInput, host: Optional[str], settings: AppSettings) -> bool:
    """Add button rule: the port parses and some host is available."""
    if parse_port(port) is None:
        return False
    custom_host = (host or "").strip()
    default_host = (settings.host or "").strip()
    return bool(custom_host or default_host)


def can_save_service(port: PortInput) -> bool:
    """Save button rule for the edit form."""
    return parse_port(port) is not None
