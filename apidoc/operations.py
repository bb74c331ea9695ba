"""Domain: lookup of declared operations by subject key.

Operation declarations are collected first and indexed once per build session.
Lookups after the build are plain dictionary reads.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from .errors import ConfigurationError
from .model import OperationDecl, OperationShape, SubjectKey

logger = logging.getLogger(__name__)

OperationLookup = Dict[SubjectKey, Tuple[OperationShape, ...]]
OperationSource = Union[Iterable[OperationDecl], Callable[[], Iterable[OperationDecl]]]


def index_operations(declarations: Iterable[OperationDecl]) -> OperationLookup:
    """Group ``declarations`` by subject key, keeping declaration order.

    Methods are free-form tokens; only surrounding whitespace is removed.
    """
    grouped: Dict[SubjectKey, list[OperationShape]] = {}
    for decl in declarations:
        grouped.setdefault(decl.subject, []).append(
            OperationShape(title=decl.title, method=str(decl.method or "").strip())
        )
    return {subject: tuple(shapes) for subject, shapes in grouped.items()}


def lookup(index: OperationLookup, subject: SubjectKey) -> Optional[Tuple[OperationShape, ...]]:
    """Return the operations for ``subject`` or ``None`` if there are none."""
    return index.get(subject)


class OperationIndex:
    """Build-once, read-many index over a source of operation declarations.

    ``source`` is either an iterable of declarations or a callable that scans
    the host and returns them. The scan runs at most once; ``scan_count`` tells
    how many times it ran.
    """

    def __init__(self, source: OperationSource = ()) -> None:
        self._scanners: list[Callable[[], Iterable[OperationDecl]]] = []
        self._index: Optional[OperationLookup] = None
        self._lock = threading.Lock()
        self.scan_count = 0
        self.declare(source)

    @property
    def is_built(self) -> bool:
        return self._index is not None

    def declare(self, source: OperationSource) -> "OperationIndex":
        """Add declarations to the index; only allowed before it is built."""
        with self._lock:
            if self._index is not None:
                raise ConfigurationError(
                    "Operations cannot be declared after the operation index was built"
                )
            if callable(source):
                self._scanners.append(source)
            else:
                declarations = tuple(source)
                self._scanners.append(lambda: declarations)
        return self

    def build(self) -> OperationLookup:
        """Return the index, scanning the declaration sources on first call."""
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is None:
                self.scan_count += 1
                declarations: list[OperationDecl] = []
                for scan in self._scanners:
                    declarations.extend(scan())
                self._index = index_operations(declarations)
                logger.debug(
                    f"Indexed {len(declarations)} operations for {len(self._index)} subjects"
                )
            return self._index

    def lookup(self, subject: SubjectKey) -> Optional[Tuple[OperationShape, ...]]:
        return lookup(self.build(), subject)


__all__ = ["OperationLookup", "OperationSource", "index_operations", "lookup", "OperationIndex"]
