"""Errors raised while assembling API documentation."""


class HydraDocError(Exception):
    """Base class for documentation build errors."""


class ConfigurationError(HydraDocError, ValueError):
    """A type or declaration lacks the metadata required to document it."""


class DuplicateIdentityError(HydraDocError, ValueError):
    """A supported class identity was registered more than once."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"Supported class {identity!r} is already documented")
        self.identity = identity


class DuplicateIdentityWarning(UserWarning):
    """Emitted instead of :class:`DuplicateIdentityError` in ``warn`` mode."""


class DocumentDecodeError(HydraDocError, ValueError):
    """A JSON-LD payload does not have the ApiDocumentation shape."""


__all__ = [
    "HydraDocError",
    "ConfigurationError",
    "DuplicateIdentityError",
    "DuplicateIdentityWarning",
    "DocumentDecodeError",
]
