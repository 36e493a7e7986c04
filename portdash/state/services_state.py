"""Services state for PortDash."""

import dataclasses
from typing import List, Optional
import reflex as rx

from ..models.app_settings import AppSettings, DEFAULT_HOST
from ..store import PortDashError, category_registry, service_registry, settings_store
from ..store.service_registry import UNCATEGORIZED
from ..utils.symbols import DEFAULT_SYMBOL, custom_symbol, filter_symbols, resolve_symbol
from ..utils.urls import (
    build_url,
    can_add_service,
    can_open,
    can_save_service,
    preview_label,
)

# HTTPS override choices in the service form
HTTPS_DEFAULT = "Default"
HTTPS_ON = "HTTPS"
HTTPS_OFF = "HTTP"
HTTPS_OPTIONS = [HTTPS_DEFAULT, HTTPS_OFF, HTTPS_ON]

NEW_SERVICE_ID = -1


def https_override(choice: str) -> Optional[bool]:
    """Map a form choice to Service.customUseHTTPS."""
    if choice == HTTPS_ON:
        return True
    if choice == HTTPS_OFF:
        return False
    return None


def https_choice(value: Optional[bool]) -> str:
    """Map Service.customUseHTTPS to a form choice."""
    if value is None:
        return HTTPS_DEFAULT
    return HTTPS_ON if value else HTTPS_OFF


@dataclasses.dataclass
class ServiceRow:
    """One service as rendered in the list."""

    id: int
    name: str
    url: str
    symbol: str
    openable: bool


@dataclasses.dataclass
class ServiceGroupRow:
    category: str
    services: List[ServiceRow]


def service_row(service, settings: AppSettings) -> ServiceRow:
    url = build_url(service, settings)
    return ServiceRow(
        id=service.id,
        name=service.name,
        url=url,
        symbol=resolve_symbol(service.symbolName),
        openable=can_open(url),
    )


class ServicesState(rx.State):
    """Service list, add/edit form and launching."""

    # Grouped list
    groups: List[ServiceGroupRow] = []
    total_services: int = 0

    # Copy of the global defaults for previews
    default_host: str = DEFAULT_HOST
    default_use_https: bool = False

    # Form options
    category_options: List[str] = [UNCATEGORIZED]

    # Form fields
    show_editor: bool = False
    editing_id: int = NEW_SERVICE_ID
    form_name: str = ""
    form_port: str = ""
    form_host: str = ""
    form_https: str = HTTPS_DEFAULT
    form_symbol: str = DEFAULT_SYMBOL
    form_category: str = ""
    form_message: str = ""

    # Icon picker
    show_symbol_picker: bool = False
    symbol_query: str = ""

    # Loading
    is_loading: bool = False

    def _settings(self) -> AppSettings:
        return AppSettings(host=self.default_host, useHTTPS=self.default_use_https)

    @rx.var
    def is_editing(self) -> bool:
        return self.editing_id != NEW_SERVICE_ID

    @rx.var
    def editor_title(self) -> str:
        return "Edit Service" if self.editing_id != NEW_SERVICE_ID else "New Service"

    @rx.var
    def preview(self) -> str:
        """Label and URL for the service being edited."""
        return preview_label(
            self.form_name,
            self.form_port,
            self.form_host,
            https_override(self.form_https),
            self._settings(),
        )

    @rx.var
    def can_submit(self) -> bool:
        if self.editing_id != NEW_SERVICE_ID:
            return can_save_service(self.form_port)
        return can_add_service(self.form_port, self.form_host, self._settings())

    @rx.var
    def form_symbol_display(self) -> str:
        return resolve_symbol(self.form_symbol)

    @rx.var
    def form_category_display(self) -> str:
        return self.form_category or UNCATEGORIZED

    @rx.var
    def symbol_results(self) -> List[str]:
        return filter_symbols(self.symbol_query)

    @rx.var
    def custom_symbol_result(self) -> str:
        return custom_symbol(self.symbol_query) or ""

    def load_services(self):
        """Load grouped services, defaults and category options."""
        self.is_loading = True
        self._refresh_list()
        self.is_loading = False

    def _refresh_list(self):
        with rx.session() as session:
            settings = settings_store.get_or_create_settings(session)
            self.default_host = settings.host
            self.default_use_https = settings.useHTTPS

            groups = service_registry.list_services(session, hide_orphans=True)
            self.groups = [
                ServiceGroupRow(
                    category=group.category,
                    services=[service_row(service, settings) for service in group.services],
                )
                for group in groups
            ]
            self.total_services = sum(len(group.services) for group in groups)
            self.category_options = [UNCATEGORIZED] + category_registry.category_choices(session)

    # Form setters
    def set_form_name(self, value: str):
        self.form_name = value

    def set_form_port(self, value: str):
        self.form_port = value

    def set_form_host(self, value: str):
        self.form_host = value

    def set_form_https(self, value: str):
        self.form_https = value

    def set_form_category(self, value: str):
        self.form_category = "" if value == UNCATEGORIZED else value

    def set_symbol_query(self, value: str):
        self.symbol_query = value

    def set_show_editor(self, value: bool):
        self.show_editor = value

    def open_new_form(self):
        """Open the editor with a blank service."""
        self.editing_id = NEW_SERVICE_ID
        self.form_name = ""
        self.form_port = ""
        self.form_host = ""
        self.form_https = HTTPS_DEFAULT
        self.form_symbol = DEFAULT_SYMBOL
        self.form_category = ""
        self.form_message = ""
        self.show_editor = True

    def open_edit_form(self, service_id: int):
        """Open the editor for an existing service."""
        with rx.session() as session:
            try:
                service = service_registry.get_service(session, service_id)
            except PortDashError as e:
                return rx.toast.error(str(e))

            self.editing_id = service.id
            self.form_name = service.name
            self.form_port = str(service.port)
            self.form_host = service.customHost or ""
            self.form_https = https_choice(service.customUseHTTPS)
            self.form_symbol = service.symbolName or DEFAULT_SYMBOL
            self.form_category = service.category or ""
        self.form_message = ""
        self.show_editor = True

    def close_editor(self):
        self._reset_editor()

    def _reset_editor(self):
        self.show_editor = False
        self.show_symbol_picker = False
        self.form_message = ""

    def save_service(self):
        """Create or update the service in the form."""
        fields = dict(
            name=self.form_name,
            port=self.form_port,
            custom_host=self.form_host,
            custom_use_https=https_override(self.form_https),
            symbol_name=self.form_symbol,
            category=self.form_category,
        )

        with rx.session() as session:
            try:
                if self.editing_id == NEW_SERVICE_ID:
                    service = service_registry.create_service(session, **fields)
                else:
                    service = service_registry.update_service(session, self.editing_id, **fields)
            except PortDashError as e:
                self.form_message = str(e)
                return
            name = service.name

        self._reset_editor()
        self._refresh_list()
        return rx.toast.success(f"Saved {name}")

    def delete_service(self, service_id: int):
        """Delete a service."""
        with rx.session() as session:
            try:
                service_registry.delete_service(session, service_id)
            except PortDashError as e:
                return rx.toast.error(str(e))
        self._refresh_list()

    def open_service(self, service_id: int):
        """Hand the service URL to the browser."""
        with rx.session() as session:
            try:
                service = service_registry.get_service(session, service_id)
            except PortDashError as e:
                return rx.toast.error(str(e))
            settings = settings_store.get_or_create_settings(session)
            url = build_url(service, settings)

        if not can_open(url):
            return rx.toast.error(f"Cannot open {url}: no host configured")
        return rx.redirect(url, is_external=True)

    # Icon picker
    def toggle_symbol_picker(self):
        if not self.show_symbol_picker:
            self.symbol_query = ""
        self.show_symbol_picker = not self.show_symbol_picker

    def choose_symbol(self, name: str):
        self.form_symbol = name
        self.show_symbol_picker = False
