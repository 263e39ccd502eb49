"""
Custom exceptions for the ff-query package.
"""


class FFQueryError(Exception):
    """Base exception for all ff-query errors."""

    pass


class DuplicateBindVariable(FFQueryError, ValueError):
    """Raised when an explicit bind variable name is already defined on a query."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Bind variable named '{name}' already defined")


class UnsupportedParamStyle(FFQueryError, ValueError):
    """Raised when asking for a driver parameter style that has no adapter."""

    def __init__(self, style: str, supported_styles: list = None):
        self.style = style
        self.supported_styles = supported_styles or []

        if supported_styles:
            message = (
                f"Unsupported parameter style: {style}. "
                f"Supported styles: {', '.join(supported_styles)}"
            )
        else:
            message = f"Unsupported parameter style: {style}"

        super().__init__(message)


class ConfigurationError(FFQueryError):
    """Raised when logging or settings configuration is invalid."""

    pass
