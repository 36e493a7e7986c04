"""Category management card for the settings page."""

import reflex as rx

from ..state.settings_state import SettingsState


def category_row(category: rx.Var) -> rx.Component:
    """A category with rename and delete actions."""
    return rx.cond(
        SettingsState.rename_id == category["id"],
        rx.hstack(
            rx.input(
                value=SettingsState.rename_value,
                on_change=SettingsState.set_rename_value,
                size="2",
                flex="1",
            ),
            rx.button("Save", size="1", on_click=SettingsState.save_rename),
            rx.button(
                "Cancel",
                size="1",
                variant="outline",
                on_click=SettingsState.cancel_rename,
            ),
            spacing="2",
            width="100%",
            align="center",
        ),
        rx.hstack(
            rx.icon("folder", size=16, color="gray"),
            rx.text(category["name"], size="2"),
            rx.spacer(),
            rx.button(
                rx.icon("pencil", size=14),
                variant="ghost",
                size="1",
                on_click=SettingsState.start_rename(category["id"], category["name"]),
            ),
            rx.button(
                rx.icon("trash-2", size=14),
                variant="ghost",
                color_scheme="red",
                size="1",
                on_click=SettingsState.delete_category(category["id"]),
            ),
            spacing="2",
            width="100%",
            align="center",
        ),
    )


def category_manager() -> rx.Component:
    """Add, rename and delete categories."""
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.heading("Categories", size="4"),
                rx.spacer(),
                rx.button(
                    rx.icon("list-plus", size=14),
                    "Add defaults",
                    variant="outline",
                    size="1",
                    on_click=SettingsState.seed_categories,
                ),
                width="100%",
                align="center",
            ),
            rx.text(
                "Deleting a category keeps its services; they move to Uncategorized.",
                size="1",
                color="gray",
            ),
            rx.hstack(
                rx.input(
                    placeholder="New category",
                    value=SettingsState.new_category_name,
                    on_change=SettingsState.set_new_category_name,
                    flex="1",
                ),
                rx.button(
                    rx.icon("plus", size=14),
                    "Add",
                    on_click=SettingsState.add_category,
                ),
                spacing="2",
                width="100%",
            ),
            rx.cond(
                SettingsState.category_message != "",
                rx.callout(
                    SettingsState.category_message,
                    icon=rx.cond(SettingsState.category_error, "circle-alert", "check"),
                    color=rx.cond(SettingsState.category_error, "red", "green"),
                ),
            ),
            rx.divider(),
            rx.cond(
                SettingsState.categories.length() > 0,
                rx.foreach(SettingsState.categories, category_row),
                rx.text("No categories yet", size="2", color="gray"),
            ),
            spacing="3",
            width="100%",
        ),
        padding="4",
        width="100%",
    )
