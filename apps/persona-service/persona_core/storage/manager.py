"""
Training storage manager.

Validates content against the category policy, writes it at the subject's
deterministic location and hands the descriptor back to the caller, who is
responsible for persisting it on the owning record.

Concurrent ``set_content`` calls for the same subject are not coordinated:
they race at the filesystem and the last completed write wins. The expected
access pattern is a single writer per subject.
"""
from __future__ import annotations

import logging
from typing import Optional

from .backends import LOCAL_SCHEME, LocalFileBackend
from .config import StorageConfig
from .errors import ContentTooLarge, StorageResult, TrainingStorageError
from .locations import (
    EMPTY_DESCRIPTOR,
    BackendRegistry,
    LocationResolver,
    is_empty,
    parse_descriptor,
)
from .policy import DEFAULT_CONTENT_POLICY, ContentPolicy, TrainingSubject

logger = logging.getLogger(__name__)


class TrainingStorageManager:
    def __init__(self, resolver: LocationResolver, policy: Optional[ContentPolicy] = None) -> None:
        self.resolver = resolver
        self.policy = policy or DEFAULT_CONTENT_POLICY

    def descriptor_for(self, subject: TrainingSubject) -> str:
        return self.resolver.descriptor_for(subject)

    def set_content(
        self,
        subject: TrainingSubject,
        content: Optional[str],
        current: Optional[str] = None,
    ) -> StorageResult[str]:
        """Store ``content`` for ``subject`` and return its descriptor.

        ``current`` is the descriptor the caller holds for the subject, if
        any. Blank content clears the subject and yields the empty
        descriptor. The new content is written before a stale ``current``
        location is removed; an unchanged location is overwritten in place.
        """
        try:
            if content is None or not content.strip():
                self._clear(subject, current)
                return StorageResult.success(EMPTY_DESCRIPTOR)

            if not self.policy.allows(subject.category, content):
                limit = self.policy.max_length(subject.category)
                error = ContentTooLarge(subject.category.value, limit, len(content))
                logger.info("training_content_rejected: owner=%s %s", subject.owner_id, error.message)
                return StorageResult.failure(error)

            descriptor = self.resolver.descriptor_for(subject)
            backend, path = self.resolver.resolve(descriptor)
            backend.write(path, content)
            logger.info(
                "training_content_stored: owner=%s category=%s chars=%d",
                subject.owner_id,
                subject.category.value,
                len(content),
            )
            if not is_empty(current) and not _same_location(current, descriptor):
                self._discard_stale(current)
            return StorageResult.success(descriptor)
        except TrainingStorageError as exc:
            return self._failed("set", exc)

    def get_content(self, descriptor: Optional[str]) -> StorageResult[str]:
        if is_empty(descriptor):
            return StorageResult.success("")
        try:
            backend, path = self.resolver.resolve(descriptor)
            return StorageResult.success(backend.read(path))
        except TrainingStorageError as exc:
            return self._failed("get", exc)

    def delete_content(self, descriptor: Optional[str]) -> StorageResult[None]:
        if is_empty(descriptor):
            return StorageResult.success(None)
        try:
            backend, path = self.resolver.resolve(descriptor)
            backend.delete(path)
            return StorageResult.success(None)
        except TrainingStorageError as exc:
            return self._failed("delete", exc)

    def _clear(self, subject: TrainingSubject, current: Optional[str]) -> None:
        canonical = self.resolver.descriptor_for(subject)
        if not is_empty(current) and not _same_location(current, canonical):
            self._discard_stale(current)
        backend, path = self.resolver.resolve(canonical)
        backend.delete(path)
        logger.info("training_content_cleared: owner=%s category=%s", subject.owner_id, subject.category.value)

    def _discard_stale(self, descriptor: str) -> None:
        # A blob left at a descriptor we cannot resolve is only an orphan.
        try:
            backend, path = self.resolver.resolve(descriptor)
            backend.delete(path)
        except TrainingStorageError as exc:
            logger.warning("stale_training_blob_not_removed: descriptor=%s error=%s", descriptor, exc.message)

    @staticmethod
    def _failed(operation: str, exc: TrainingStorageError) -> StorageResult:
        if exc.kind.is_validation:
            logger.info("training_storage_%s_rejected: %s", operation, exc.message)
        else:
            logger.error("training_storage_%s_failed: %s", operation, exc.message, exc_info=exc)
        return StorageResult.failure(exc)


def _same_location(left: str, right: str) -> bool:
    try:
        return parse_descriptor(left) == parse_descriptor(right)
    except TrainingStorageError:
        return False


def build_training_storage_manager(
    config: Optional[StorageConfig] = None,
    policy: Optional[ContentPolicy] = None,
) -> TrainingStorageManager:
    """Assemble a manager with the local backend registered."""
    config = config or StorageConfig.from_env()
    registry = BackendRegistry()
    registry.register(LOCAL_SCHEME, LocalFileBackend(config.base_dir))
    resolver = LocationResolver(registry, default_scheme=config.default_scheme)
    return TrainingStorageManager(resolver, policy=policy)


_training_storage_manager: Optional[TrainingStorageManager] = None


def get_training_storage_manager() -> TrainingStorageManager:
    global _training_storage_manager
    if _training_storage_manager is None:
        _training_storage_manager = build_training_storage_manager()
    return _training_storage_manager


def reset_training_storage_manager_for_tests() -> None:  # pragma: no cover - used in tests
    global _training_storage_manager
    _training_storage_manager = None
