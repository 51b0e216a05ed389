"""Exception taxonomy for configuration, payload, render, and filesystem failures"""


class PolysiteError(Exception):
    """Base class for every error the build surfaces to its caller."""


class ConfigError(PolysiteError, ValueError):
    """Invalid settings or theme configuration."""


class ThemeNotFoundError(ConfigError):
    """The requested theme name is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown theme '{name}' (available: {', '.join(available) or 'none'})")


class PayloadError(PolysiteError, ValueError):
    """A build payload or content directory could not be loaded."""


class RenderError(PolysiteError, RuntimeError):
    """A theme failed to render a route. Fatal for the whole build."""


class BuildError(PolysiteError, RuntimeError):
    """A filesystem step failed. Fatal; the output tree is unreliable."""
