"""Error types raised while decoding button configurations."""


class ConfigError(Exception):
    """Raised when a config document cannot be decoded into a ButtonConfig."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
