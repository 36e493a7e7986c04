"""Category registry.

Services reference a category by its name. Renaming a category moves the
services that use the old name; deleting one clears their reference
instead of deleting them.
"""

import logging
from typing import List, Optional

from sqlmodel import Session, select

from ..models.service import Service
from ..models.service_category import ServiceCategory
from ..utils.collation import collation_key, names_equal
from .errors import DuplicateCategoryError, NotFoundError, UnchangedCategoryNameError
from .transaction import committing

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "Entertainment",
    "Financial",
    "Creative",
    "AI",
    "Productivity",
    "Developer",
    "Utilities",
    "Security",
    "Monitoring",
    "Networking",
    "Storage",
    "Home",
    "Education",
]


def find_category(session: Session, name: str) -> Optional[ServiceCategory]:
    """Category with the given name, ignoring case."""
    name = name.strip()
    for category in session.exec(select(ServiceCategory)).all():
        if names_equal(category.name, name):
            return category
    return None


def get_category(session: Session, category_id: int) -> ServiceCategory:
    category = session.get(ServiceCategory, category_id)
    if category is None:
        raise NotFoundError("Category", category_id)
    return category


def _check_available(session: Session, name: str, exclude_id: Optional[int] = None) -> None:
    if not name:
        raise DuplicateCategoryError(name, "Category name is empty")
    existing = find_category(session, name)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateCategoryError(name)


def add_category(session: Session, name: str) -> ServiceCategory:
    """Register a category. Raises DuplicateCategoryError for blank or taken names."""
    name = (name or "").strip()
    try:
        _check_available(session, name)
    except DuplicateCategoryError as e:
        logger.warning("Rejected category %r: %s", name, e)
        raise

    category = ServiceCategory(name=name)
    with committing(session):
        session.add(category)
    session.refresh(category)
    logger.info("Added category %r", name)
    return category


def rename_category(session: Session, category_id: int, new_name: str) -> ServiceCategory:
    """Rename a category and move its services to the new name."""
    category = get_category(session, category_id)
    new_name = (new_name or "").strip()
    old_name = category.name

    try:
        if new_name and names_equal(new_name, old_name):
            raise UnchangedCategoryNameError(new_name)
        _check_available(session, new_name, exclude_id=category.id)
    except DuplicateCategoryError as e:
        logger.warning("Rejected rename of %r to %r: %s", old_name, new_name, e)
        raise

    with committing(session):
        services = session.exec(select(Service).where(Service.category == old_name)).all()
        for service in services:
            service.category = new_name
            session.add(service)

        category.name = new_name
        session.add(category)
    session.refresh(category)
    logger.info("Renamed category %r to %r (%d services moved)", old_name, new_name, len(services))
    return category


def delete_category(session: Session, category_id: int) -> None:
    """Delete a category, clearing it from every service that uses it."""
    category = get_category(session, category_id)
    name = category.name

    with committing(session):
        services = session.exec(select(Service).where(Service.category == name)).all()
        for service in services:
            service.category = None
            session.add(service)

        session.delete(category)
    logger.info("Deleted category %r (%d services uncategorized)", name, len(services))


def list_categories(session: Session) -> List[ServiceCategory]:
    """All categories sorted by name, ignoring case."""
    categories = session.exec(select(ServiceCategory).order_by(ServiceCategory.id)).all()
    return sorted(categories, key=lambda c: (collation_key(c.name), c.id))


def category_choices(session: Session) -> List[str]:
    """Names offered by the service form: registered categories plus any
    still referenced by a service."""
    names = [c.name for c in list_categories(session)]
    referenced = session.exec(
        select(Service.category).where(Service.category.is_not(None)).distinct()
    ).all()
    for raw in referenced:
        value = (raw or "").strip()
        if value and not any(names_equal(value, n) for n in names):
            names.append(value)
    return sorted(names, key=collation_key)


def seed_default_categories(session: Session) -> List[ServiceCategory]:
    """Add the stock categories that do not exist yet. Returns the new ones."""
    created = []
    with committing(session):
        for name in DEFAULT_CATEGORIES:
            if find_category(session, name) is not None:
                continue
            category = ServiceCategory(name=name)
            session.add(category)
            created.append(category)

    for category in created:
        session.refresh(category)
    logger.info("Seeded %d default categories", len(created))
    return created
