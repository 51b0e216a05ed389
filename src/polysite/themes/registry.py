"""Static registry of built-in themes, resolved by name at build start"""

from polysite.errors import ThemeNotFoundError
from polysite.themes.base import Theme


DEFAULT_THEME = 'classic'

_REGISTRY: dict[str, type[Theme]] = {}


def register_theme(cls: type[Theme]) -> type[Theme]:
    """Class decorator adding a Theme subclass under its `name`."""
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a non-empty name")
    _REGISTRY[cls.name] = cls
    return cls


def available_themes() -> list[str]:
    _load_builtin()
    return sorted(_REGISTRY)


def get_theme(name: str = None) -> Theme:
    """Instantiate the theme registered as name (case-insensitive; blank -> classic)."""
    _load_builtin()
    key = str(name or DEFAULT_THEME).strip().lower()
    cls = _REGISTRY.get(key)
    if cls is None:
        raise ThemeNotFoundError(key, sorted(_REGISTRY))
    return cls()


def _load_builtin() -> None:
    # Importing the modules runs their @register_theme decorators.
    from polysite.themes import classic, cyberchat, minimal  # noqa: F401

