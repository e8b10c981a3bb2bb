"""
Storage backends.

Only the local filesystem backend exists. Other schemes (object storage,
HTTP, cloud blob) plug in by registering a class with the same
``read``/``write``/``delete`` methods under their own scheme name.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .errors import StorageIOFailure
from .policy import TrainingCategory, TrainingSubject

logger = logging.getLogger(__name__)

LOCAL_SCHEME = "local"
_SUFFIX = ".txt"


class LocalFileBackend:
    """Plain files under a base directory, one file per training subject.

    Writes are full overwrites and are not atomic: a crash mid-write can leave
    a truncated file behind. A missing file reads as empty content.
    """

    scheme = LOCAL_SCHEME

    def __init__(self, base_dir: Union[str, os.PathLike]) -> None:
        self.base_dir = Path(base_dir).expanduser().resolve()
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOFailure("prepare", self.base_dir.as_posix(), exc) from exc
        if not self.base_dir.is_dir():
            raise StorageIOFailure(
                "prepare",
                self.base_dir.as_posix(),
                NotADirectoryError(f"{self.base_dir} is not a directory"),
            )
        logger.info("local_training_storage_ready: base_dir=%s", self.base_dir)

    def file_name(self, subject: TrainingSubject) -> str:
        if subject.category == TrainingCategory.TOPIC:
            return f"{subject.owner_id}-topic-{subject.topic_id}{_SUFFIX}"
        return f"{subject.owner_id}-general{_SUFFIX}"

    def locate(self, subject: TrainingSubject) -> str:
        return (self.base_dir / self.file_name(subject)).as_posix()

    def read(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8", newline="") as fh:
                return fh.read()
        except FileNotFoundError:
            logger.debug("training_blob_missing: path=%s", path)
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOFailure("read", path, exc) from exc

    def write(self, path: str, content: str) -> None:
        target = Path(path)
        # Encode before opening so an unencodable string never truncates the old file.
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise StorageIOFailure("write", path, exc) from exc
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as fh:
                fh.write(data)
        except OSError as exc:
            raise StorageIOFailure("write", path, exc) from exc
        logger.debug("training_blob_written: path=%s chars=%d", path, len(content))

    def delete(self, path: str) -> None:
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageIOFailure("delete", path, exc) from exc
        logger.debug("training_blob_deleted: path=%s", path)
