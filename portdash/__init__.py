"""PortDash - launcher dashboard for self-hosted network services."""

__version__ = "2025.10.1"
