"""Service registry - CRUD and grouped listing of bookmarked services."""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from sqlmodel import Session, select

from ..models.service import Service
from ..models.service_category import ServiceCategory
from ..utils.collation import collation_key, fold
from ..utils.urls import PortInput, parse_port
from .errors import InvalidPortError, NotFoundError
from .transaction import committing

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"

MIN_PORT = 1
MAX_PORT = 65535


class ServiceGroup(NamedTuple):
    category: str
    services: List[Service]


def validate_port(port: PortInput) -> int:
    """Return the port as an int or raise InvalidPortError."""
    number = parse_port(port)
    if number is None or not MIN_PORT <= number <= MAX_PORT:
        raise InvalidPortError(port)
    return number


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim a string; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def default_name(port: int) -> str:
    return f"Service :{port}"


def _apply_fields(
    service: Service,
    name: Optional[str],
    port: int,
    custom_host: Optional[str],
    custom_use_https: Optional[bool],
    symbol_name: Optional[str],
    category: Optional[str],
) -> None:
    service.name = (name or "").strip() or default_name(port)
    service.port = port
    service.customHost = clean_optional(custom_host)
    service.customUseHTTPS = custom_use_https
    service.symbolName = clean_optional(symbol_name)
    service.category = clean_optional(category)


def create_service(
    session: Session,
    name: Optional[str],
    port: PortInput,
    custom_host: Optional[str] = None,
    custom_use_https: Optional[bool] = None,
    symbol_name: Optional[str] = None,
    category: Optional[str] = None,
) -> Service:
    """Add a service. Raises InvalidPortError before touching the database."""
    try:
        port_number = validate_port(port)
    except InvalidPortError:
        logger.warning("Rejected new service %r: invalid port %r", name, port)
        raise

    service = Service(name="", port=port_number)
    _apply_fields(
        service, name, port_number, custom_host, custom_use_https, symbol_name, category
    )

    with committing(session):
        session.add(service)
    session.refresh(service)
    logger.info("Created service %r on port %d", service.name, service.port)
    return service


def get_service(session: Session, service_id: int) -> Service:
    service = session.get(Service, service_id)
    if service is None:
        raise NotFoundError("Service", service_id)
    return service


def update_service(
    session: Session,
    service_id: int,
    name: Optional[str],
    port: PortInput,
    custom_host: Optional[str] = None,
    custom_use_https: Optional[bool] = None,
    symbol_name: Optional[str] = None,
    category: Optional[str] = None,
) -> Service:
    """Replace the editable fields of a service.

    Same rules as create_service; the default name is derived again from
    the new port when the name is blank.
    """
    service = get_service(session, service_id)
    try:
        port_number = validate_port(port)
    except InvalidPortError:
        logger.warning("Rejected update of service %s: invalid port %r", service_id, port)
        raise

    with committing(session):
        _apply_fields(
            service, name, port_number, custom_host, custom_use_https, symbol_name, category
        )
        session.add(service)
    session.refresh(service)
    logger.info("Updated service %s (%r)", service_id, service.name)
    return service


def delete_service(session: Session, service_id: int) -> None:
    service = get_service(session, service_id)
    name = service.name
    with committing(session):
        session.delete(service)
    logger.info("Deleted service %s (%r)", service_id, name)


def all_services(session: Session) -> List[Service]:
    """All services in insertion order."""
    return list(session.exec(select(Service).order_by(Service.id)).all())


def group_key(service: Service, known_categories: Optional[set] = None) -> str:
    """Display group for a service.

    Blank categories are "Uncategorized". When ``known_categories`` (folded
    names) is given, categories missing from it are too.
    """
    key = (service.category or "").strip()
    if not key:
        return UNCATEGORIZED
    if known_categories is not None and fold(key) not in known_categories:
        return UNCATEGORIZED
    return key


def group_services(
    services: Iterable[Service],
    known_categories: Optional[Iterable[str]] = None,
) -> List[ServiceGroup]:
    """Group services by category, groups and members sorted by name."""
    known = None
    if known_categories is not None:
        known = {fold(name) for name in known_categories}

    groups: Dict[str, List[Service]] = {}
    for service in services:
        groups.setdefault(group_key(service, known), []).append(service)

    result = []
    for key in sorted(groups, key=lambda k: (collation_key(k), k)):
        members = sorted(
            groups[key],
            key=lambda s: (collation_key(s.name), s.id if s.id is not None else 0),
        )
        result.append(ServiceGroup(category=key, services=members))
    return result


def list_services(session: Session, hide_orphans: bool = False) -> List[ServiceGroup]:
    """Services grouped by category for display.

    With ``hide_orphans`` a category that is not registered shows as
    "Uncategorized".
    """
    known = None
    if hide_orphans:
        known = [c.name for c in session.exec(select(ServiceCategory)).all()]
    return group_services(all_services(session), known)


def find_service_by_name(session: Session, name: str) -> Optional[Service]:
    """First service whose name matches, ignoring case."""
    target = fold(name.strip())
    for service in all_services(session):
        if fold(service.name) == target:
            return service
    return None
