class ClimateDashboardError(Exception):
    """Base class for dashboard errors."""


class ConfigError(ClimateDashboardError):
    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class UnknownOptionError(ClimateDashboardError, ValueError):
    """A view-mode value outside its fixed option list."""

    def __init__(self, kind: str, value, options):
        super().__init__(f"Unknown {kind} {value!r}; expected one of {list(options)}")
        self.kind = kind
        self.value = value
