"""Training content storage: policy, descriptors, backends and the manager."""

from .backends import LOCAL_SCHEME, LocalFileBackend
from .config import StorageConfig
from .errors import (
    ContentTooLarge,
    ErrorKind,
    InvalidLocationFormat,
    StorageIOFailure,
    StorageResult,
    TrainingStorageError,
    UnsupportedScheme,
)
from .locations import (
    EMPTY_DESCRIPTOR,
    BackendRegistry,
    Location,
    LocationResolver,
    StorageBackend,
    build_descriptor,
    parse_descriptor,
)
from .manager import (
    TrainingStorageManager,
    build_training_storage_manager,
    get_training_storage_manager,
    reset_training_storage_manager_for_tests,
)
from .policy import DEFAULT_CONTENT_POLICY, ContentPolicy, TrainingCategory, TrainingSubject

__all__ = [
    "LOCAL_SCHEME",
    "LocalFileBackend",
    "StorageConfig",
    "ContentTooLarge",
    "ErrorKind",
    "InvalidLocationFormat",
    "StorageIOFailure",
    "StorageResult",
    "TrainingStorageError",
    "UnsupportedScheme",
    "EMPTY_DESCRIPTOR",
    "BackendRegistry",
    "Location",
    "LocationResolver",
    "StorageBackend",
    "build_descriptor",
    "parse_descriptor",
    "TrainingStorageManager",
    "build_training_storage_manager",
    "get_training_storage_manager",
    "reset_training_storage_manager_for_tests",
    "DEFAULT_CONTENT_POLICY",
    "ContentPolicy",
    "TrainingCategory",
    "TrainingSubject",
]
