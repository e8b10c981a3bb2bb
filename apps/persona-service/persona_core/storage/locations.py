"""
Location descriptors and scheme dispatch.

A descriptor is an opaque ``<scheme>://<path>`` string. Only this package
builds non-empty descriptors; everything else stores and passes them around
verbatim (the persona record keeps one in ``training_file_path``).
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

from .errors import InvalidLocationFormat, UnsupportedScheme
from .policy import TrainingSubject

logger = logging.getLogger(__name__)

EMPTY_DESCRIPTOR = ""

_DESCRIPTOR_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://(?P<path>.+)$", re.DOTALL)


@runtime_checkable
class StorageBackend(Protocol):
    """Capabilities every scheme backend provides."""

    def read(self, path: str) -> str: ...

    def write(self, path: str, content: str) -> None: ...

    def delete(self, path: str) -> None: ...


@runtime_checkable
class LocatingBackend(StorageBackend, Protocol):
    """Backend that can also place a subject, required for the default scheme."""

    def locate(self, subject: TrainingSubject) -> str: ...


@dataclass(frozen=True)
class Location:
    scheme: str
    path: str


def is_empty(descriptor: Optional[str]) -> bool:
    return descriptor is None or not descriptor.strip()


def normalize_path(path: str) -> str:
    """Forward slashes only, and a single leading slash for absolute paths."""
    normalized = path.replace("\\", "/")
    if normalized.startswith("/"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def build_descriptor(scheme: str, path: str) -> str:
    return f"{scheme.lower()}://{normalize_path(path)}"


def parse_descriptor(descriptor: str) -> Location:
    """Split a descriptor into scheme and path; scheme comes back lower-cased."""
    match = _DESCRIPTOR_RE.match(descriptor.strip()) if descriptor else None
    if match is None:
        raise InvalidLocationFormat(descriptor)
    return Location(scheme=match.group("scheme").lower(), path=match.group("path"))


class BackendRegistry:
    """Backends keyed by scheme name."""

    def __init__(self) -> None:
        self._backends: Dict[str, StorageBackend] = {}

    def register(self, scheme: str, backend: StorageBackend) -> None:
        key = scheme.lower()
        if not _DESCRIPTOR_RE.match(f"{key}://x"):
            raise ValueError(f"Invalid scheme name '{scheme}'")
        if key in self._backends:
            raise ValueError(f"A backend is already registered for scheme '{key}'")
        self._backends[key] = backend
        logger.debug("storage_backend_registered: scheme=%s backend=%s", key, type(backend).__name__)

    def get(self, scheme: str) -> StorageBackend:
        try:
            return self._backends[scheme.lower()]
        except KeyError:
            raise UnsupportedScheme(scheme, list(self._backends)) from None

    def schemes(self) -> Tuple[str, ...]:
        return tuple(sorted(self._backends))

    def __contains__(self, scheme: object) -> bool:
        return isinstance(scheme, str) and scheme.lower() in self._backends


class LocationResolver:
    """Maps subjects to descriptors and descriptors to backends."""

    def __init__(self, registry: BackendRegistry, default_scheme: str = "local") -> None:
        self.registry = registry
        self.default_scheme = default_scheme.lower()

    def descriptor_for(self, subject: TrainingSubject) -> str:
        backend = self.registry.get(self.default_scheme)
        if not isinstance(backend, LocatingBackend):
            raise TypeError(f"Backend for '{self.default_scheme}' cannot place training subjects")
        return build_descriptor(self.default_scheme, backend.locate(subject))

    def resolve(self, descriptor: str) -> Tuple[StorageBackend, str]:
        """Return the backend for ``descriptor`` and the path to hand it."""
        location = parse_descriptor(descriptor)
        return self.registry.get(location.scheme), location.path

    def dispatch(self, descriptor: str) -> StorageBackend:
        return self.resolve(descriptor)[0]
