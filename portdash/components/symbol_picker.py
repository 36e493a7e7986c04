"""Icon picker for the service editor."""

import reflex as rx

from ..state.services_state import ServicesState


def symbol_cell(name: rx.Var, is_custom: bool = False) -> rx.Component:
    """Selectable icon tile."""
    labels = [
        rx.icon(name, size=24),
        rx.text(name, size="1", color="gray", trim="both"),
    ]
    if is_custom:
        labels.append(rx.text("Custom", size="1", color="blue"))

    return rx.button(
        rx.vstack(
            *labels,
            spacing="1",
            align="center",
        ),
        variant="surface",
        color_scheme="gray",
        height="72px",
        width="88px",
        on_click=ServicesState.choose_symbol(name),
    )


def symbol_picker() -> rx.Component:
    """Searchable grid of icons."""
    return rx.vstack(
        rx.input(
            placeholder="Search icons",
            value=ServicesState.symbol_query,
            on_change=ServicesState.set_symbol_query,
            width="100%",
        ),
        rx.scroll_area(
            rx.flex(
                rx.foreach(ServicesState.symbol_results, lambda name: symbol_cell(name)),
                rx.cond(
                    ServicesState.custom_symbol_result != "",
                    symbol_cell(ServicesState.custom_symbol_result, is_custom=True),
                ),
                wrap="wrap",
                spacing="2",
            ),
            type="always",
            scrollbars="vertical",
            style={"max_height": "240px"},
        ),
        spacing="2",
        width="100%",
    )
