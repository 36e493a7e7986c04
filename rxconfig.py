"""Reflex configuration for PortDash."""

import reflex as rx

from portdash.config import get_db_url

config = rx.Config(
    app_name="portdash",
    db_url=get_db_url(),
)
