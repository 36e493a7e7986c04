"""Settings state for PortDash."""

from typing import List, Dict, Any
import reflex as rx

from ..store import PortDashError, category_registry, settings_store


class SettingsState(rx.State):
    """Default server options and category management."""

    # Default server options
    host: str = ""
    use_https: bool = False

    # Categories
    categories: List[Dict[str, Any]] = []
    new_category_name: str = ""
    category_message: str = ""
    category_error: bool = False

    # Inline rename
    rename_id: int = -1
    rename_value: str = ""

    # Loading
    is_loading: bool = False

    def _load_categories(self, session):
        self.categories = [
            {"id": c.id, "name": c.name} for c in category_registry.list_categories(session)
        ]

    def _report(self, message: str, error: bool = False):
        self.category_message = message
        self.category_error = error

    def load_settings(self):
        """Load settings and categories from database."""
        self.is_loading = True
        with rx.session() as session:
            settings = settings_store.get_or_create_settings(session)
            self.host = settings.host
            self.use_https = settings.useHTTPS
            self._load_categories(session)
        self.is_loading = False

    def set_host(self, value: str):
        """Update default host (written through immediately)."""
        self.host = value
        with rx.session() as session:
            settings_store.set_host(session, value)

    def set_use_https(self, value: bool):
        """Toggle default HTTPS (written through immediately)."""
        self.use_https = value
        with rx.session() as session:
            settings_store.set_use_https(session, value)

    def set_new_category_name(self, value: str):
        self.new_category_name = value

    def set_rename_value(self, value: str):
        self.rename_value = value

    def add_category(self):
        """Add the category typed in the input."""
        with rx.session() as session:
            try:
                category = category_registry.add_category(session, self.new_category_name)
            except PortDashError as e:
                self._report(str(e), error=True)
                return
            self._load_categories(session)
        self.new_category_name = ""
        self._report(f"Added {category.name}")

    def start_rename(self, category_id: int, name: str):
        self.rename_id = category_id
        self.rename_value = name
        self.category_message = ""

    def cancel_rename(self):
        self._clear_rename()

    def _clear_rename(self):
        self.rename_id = -1
        self.rename_value = ""

    def save_rename(self):
        """Rename the category being edited."""
        with rx.session() as session:
            try:
                category = category_registry.rename_category(session, self.rename_id, self.rename_value)
            except PortDashError as e:
                self._report(str(e), error=True)
                return
            self._load_categories(session)
        self._clear_rename()
        self._report(f"Renamed to {category.name}")

    def delete_category(self, category_id: int):
        """Delete a category; its services become uncategorized."""
        with rx.session() as session:
            try:
                category_registry.delete_category(session, category_id)
            except PortDashError as e:
                self._report(str(e), error=True)
                return
            self._load_categories(session)
        self._report("Category deleted")

    def seed_categories(self):
        """Add the default category list."""
        with rx.session() as session:
            created = category_registry.seed_default_categories(session)
            self._load_categories(session)
        self._report(f"Added {len(created)} default categories")
