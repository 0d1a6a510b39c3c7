from typing import Optional


class TextKitError(Exception):
    """Base error carrying a machine-readable code and a message."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message or "An error occurred"
        super().__init__(f"{self.code}: {self.message}")


class InvalidConfigError(TextKitError):
    """A policy or config value that cannot be used."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(code=code, message=message)


class UnknownStyleError(TextKitError):
    """A case style name with no registered policy."""

    def __init__(self, style: str, message: Optional[str] = None):
        self.style = style
        super().__init__(code="UNKNOWN_STYLE", message=message)
