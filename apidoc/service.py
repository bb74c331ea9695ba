"""
Application: assembles the Hydra API documentation from registered types.
"""
from __future__ import annotations

import logging
import threading
import warnings
from typing import Tuple

from .class_builder import derive_class, derive_collection
from .context import build_context
from .errors import ConfigurationError, DuplicateIdentityError, DuplicateIdentityWarning
from .model import ClassShape, Document, TypeDescriptor
from .operations import OperationIndex, OperationSource

logger = logging.getLogger(__name__)

ON_DUPLICATE_POLICIES = ("error", "warn")


class ApiDocumentation:
    """
    Fluent builder for one documentation build session.

    Every :meth:`register` call appends the supported class of a type, followed
    by its collection class when the type declares one. :meth:`build` returns
    the immutable :class:`~apidoc.model.Document`.

    Repeated identities are rejected with :class:`DuplicateIdentityError`, or
    appended with a :class:`DuplicateIdentityWarning` when ``on_duplicate`` is
    ``"warn"``. They are never merged.
    """

    def __init__(
        self,
        id: str,
        operations: OperationSource = (),
        *,
        on_duplicate: str = "error",
    ) -> None:
        if not id:
            raise ConfigurationError("API documentation needs an identity")
        if on_duplicate not in ON_DUPLICATE_POLICIES:
            raise ConfigurationError(
                f"Unknown duplicate policy {on_duplicate!r}; expected one of {ON_DUPLICATE_POLICIES}"
            )
        self.id = id
        self.context = build_context()
        self.on_duplicate = on_duplicate
        self.operations = operations if isinstance(operations, OperationIndex) else OperationIndex(operations)
        self._supported_classes: list[ClassShape] = []
        self._lock = threading.Lock()

    @property
    def supported_classes(self) -> Tuple[ClassShape, ...]:
        return tuple(self._supported_classes)

    def declare_operations(self, source: OperationSource) -> "ApiDocumentation":
        """Add operation declarations before the first registration."""
        self.operations.declare(source)
        return self

    def register(self, descriptor: TypeDescriptor) -> "ApiDocumentation":
        """Document ``descriptor`` and return ``self`` for chained calls."""
        supported_class = derive_class(descriptor, self.operations)
        collection = derive_collection(supported_class.id, descriptor, self.operations)
        new_shapes = [supported_class] if collection is None else [supported_class, collection]

        with self._lock:
            self._check_duplicates(new_shapes)
            self._supported_classes.extend(new_shapes)

        logger.debug(
            f"Registered {descriptor.name} as {', '.join(s.id for s in new_shapes)}"
        )
        return self

    def _check_duplicates(self, new_shapes: list[ClassShape]) -> None:
        seen = {shape.id for shape in self._supported_classes}
        for shape in new_shapes:
            if shape.id in seen:
                if self.on_duplicate == "error":
                    raise DuplicateIdentityError(shape.id)
                message = f"Supported class {shape.id!r} is documented more than once"
                logger.warning(message)
                warnings.warn(message, DuplicateIdentityWarning, stacklevel=3)
            seen.add(shape.id)

    def build(self) -> Document:
        """Return an immutable snapshot of the documentation built so far."""
        with self._lock:
            return Document(
                id=self.id,
                context=dict(self.context),
                supported_classes=tuple(self._supported_classes),
            )


__all__ = ["ApiDocumentation", "ON_DUPLICATE_POLICIES"]
