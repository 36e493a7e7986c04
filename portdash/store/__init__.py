"""Persistence-backed stores for settings, categories and services.

Every mutating function runs as one transaction on the given session.
"""

from .errors import (
    PortDashError,
    InvalidPortError,
    DuplicateCategoryError,
    UnchangedCategoryNameError,
    NotFoundError,
)
from .settings_store import get_or_create_settings, set_host, set_use_https
from .category_registry import (
    DEFAULT_CATEGORIES,
    add_category,
    category_choices,
    delete_category,
    find_category,
    get_category,
    list_categories,
    rename_category,
    seed_default_categories,
)
from .service_registry import (
    UNCATEGORIZED,
    ServiceGroup,
    create_service,
    delete_service,
    find_service_by_name,
    get_service,
    group_services,
    list_services,
    update_service,
    validate_port,
)

__all__ = [
    "PortDashError",
    "InvalidPortError",
    "DuplicateCategoryError",
    "UnchangedCategoryNameError",
    "NotFoundError",
    "get_or_create_settings",
    "set_host",
    "set_use_https",
    "DEFAULT_CATEGORIES",
    "add_category",
    "category_choices",
    "delete_category",
    "find_category",
    "get_category",
    "list_categories",
    "rename_category",
    "seed_default_categories",
    "UNCATEGORIZED",
    "ServiceGroup",
    "create_service",
    "delete_service",
    "find_service_by_name",
    "get_service",
    "group_services",
    "list_services",
    "update_service",
    "validate_port",
]
