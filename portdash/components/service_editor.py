"""Add/edit service dialog."""

import reflex as rx

from ..state.services_state import ServicesState, HTTPS_OPTIONS
from .symbol_picker import symbol_picker


def form_field(label: str, control: rx.Component, hint: str = "") -> rx.Component:
    """Label above a form control."""
    children = [rx.text(label, size="2"), control]
    if hint:
        children.append(rx.text(hint, size="1", color="gray"))
    return rx.vstack(*children, spacing="1", width="100%")


def details_section() -> rx.Component:
    """Name, category, host, scheme and port fields."""
    return rx.vstack(
        form_field(
            "Service name",
            rx.input(
                placeholder="e.g., Plex",
                value=ServicesState.form_name,
                on_change=ServicesState.set_form_name,
                width="100%",
            ),
            "Leave empty to name it after the port",
        ),
        form_field(
            "Category",
            rx.select(
                ServicesState.category_options,
                value=ServicesState.form_category_display,
                on_change=ServicesState.set_form_category,
                width="100%",
            ),
        ),
        form_field(
            "Host/IP (optional)",
            rx.input(
                placeholder="Uses the default host when empty",
                value=ServicesState.form_host,
                on_change=ServicesState.set_form_host,
                auto_capitalize="none",
                auto_correct="off",
                width="100%",
            ),
        ),
        rx.hstack(
            form_field(
                "Scheme",
                rx.select(
                    HTTPS_OPTIONS,
                    value=ServicesState.form_https,
                    on_change=ServicesState.set_form_https,
                    width="100%",
                ),
                "Default follows the global HTTPS setting",
            ),
            form_field(
                "Port",
                rx.input(
                    type="number",
                    placeholder="e.g., 8080",
                    value=ServicesState.form_port,
                    on_change=ServicesState.set_form_port,
                    width="100%",
                ),
            ),
            spacing="4",
            width="100%",
        ),
        spacing="3",
        width="100%",
    )


def icon_section() -> rx.Component:
    """Current icon with a toggle for the picker."""
    return rx.vstack(
        rx.hstack(
            rx.text("Icon", size="2"),
            rx.spacer(),
            rx.icon(ServicesState.form_symbol_display, size=20, color="#2563EB"),
            rx.text(ServicesState.form_symbol_display, size="2", color="gray"),
            rx.button(
                rx.cond(ServicesState.show_symbol_picker, "Hide", "Choose"),
                variant="outline",
                size="1",
                on_click=ServicesState.toggle_symbol_picker,
            ),
            spacing="2",
            align="center",
            width="100%",
        ),
        rx.cond(ServicesState.show_symbol_picker, symbol_picker()),
        spacing="2",
        width="100%",
    )


def service_editor_dialog() -> rx.Component:
    """Dialog for creating or editing a service."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(ServicesState.editor_title),
            rx.scroll_area(
                rx.vstack(
                    details_section(),
                    rx.divider(),
                    icon_section(),
                    rx.divider(),
                    rx.vstack(
                        rx.text("Preview", weight="bold", size="2"),
                        rx.code(ServicesState.preview, size="2"),
                        spacing="1",
                        width="100%",
                    ),
                    rx.cond(
                        ServicesState.form_message != "",
                        rx.callout(
                            ServicesState.form_message,
                            icon="circle-alert",
                            color="red",
                        ),
                    ),
                    spacing="4",
                    width="100%",
                    padding="2",
                ),
                type="always",
                scrollbars="vertical",
                style={"max_height": "70vh"},
            ),
            rx.hstack(
                rx.dialog.close(
                    rx.button(
                        "Cancel",
                        variant="outline",
                        on_click=ServicesState.close_editor,
                    ),
                ),
                rx.button(
                    rx.cond(ServicesState.is_editing, "Save", "Add"),
                    on_click=ServicesState.save_service,
                    disabled=~ServicesState.can_submit,
                    color_scheme="blue",
                ),
                spacing="3",
                justify="end",
                width="100%",
                padding_top="4",
            ),
            max_width="560px",
        ),
        open=ServicesState.show_editor,
        on_open_change=ServicesState.set_show_editor,
    )
