"""PortDash - Main Reflex Application."""

import reflex as rx

from .pages.dashboard import dashboard_page
from .pages.settings import settings_page


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="medium",
        accent_color="blue",
    ),
)

# Add pages
app.add_page(dashboard_page, route="/", title="PortDash")
app.add_page(settings_page, route="/settings", title="Settings - PortDash")
