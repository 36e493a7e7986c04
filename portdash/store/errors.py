"""Errors raised by the PortDash stores."""


class PortDashError(Exception):
    """Base class for rejected store operations."""


class InvalidPortError(PortDashError, ValueError):
    """Port is missing, not a number, or outside 1-65535."""

    def __init__(self, port):
        self.port = port
        super().__init__(f"Invalid port: {port!r} (expected 1-65535)")


class DuplicateCategoryError(PortDashError):
    """Category name is empty or already taken (ignoring case)."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"Category already exists: {name!r}")


class UnchangedCategoryNameError(DuplicateCategoryError):
    """Rename target equals the current name (ignoring case)."""

    def __init__(self, name: str):
        super().__init__(name, f"Category is already named {name!r}")


class NotFoundError(PortDashError, LookupError):
    """Referenced record does not exist."""

    def __init__(self, kind: str, record_id):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")
