import uuid

import pytest

from persona_core.storage import ErrorKind, LocalFileBackend, StorageIOFailure, TrainingSubject


@pytest.fixture
def backend(tmp_path):
    return LocalFileBackend(tmp_path / "blobs")


def test_base_dir_created_at_construction(tmp_path):
    base = tmp_path / "nested" / "training"
    assert not base.exists()
    backend = LocalFileBackend(base)
    assert base.is_dir()
    assert backend.base_dir == base.resolve()


def test_base_dir_that_is_a_file_fails(tmp_path):
    occupied = tmp_path / "occupied"
    occupied.write_text("x")
    with pytest.raises(StorageIOFailure) as exc:
        LocalFileBackend(occupied)
    assert exc.value.kind is ErrorKind.STORAGE_IO_FAILURE
    assert exc.value.details["operation"] == "prepare"


def test_write_then_read(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    backend.write(path, "hello")
    assert backend.read(path) == "hello"


def test_write_overwrites_fully(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    backend.write(path, "a much longer first version")
    backend.write(path, "short")
    assert backend.read(path) == "short"


def test_write_creates_parent_directory(backend, tmp_path):
    path = (tmp_path / "elsewhere" / "deep" / "x.txt").as_posix()
    backend.write(path, "content")
    assert backend.read(path) == "content"


def test_content_is_preserved_verbatim(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    content = "line one\r\nline two\n\tünïcødé ✓\n"
    backend.write(path, content)
    assert backend.read(path) == content


def test_read_missing_returns_empty(backend):
    assert backend.read(backend.locate(TrainingSubject.general(uuid.uuid4()))) == ""


def test_delete_is_idempotent(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    backend.write(path, "bye")
    backend.delete(path)
    assert backend.read(path) == ""
    backend.delete(path)
    backend.delete("/nonexistent/path.txt")


def test_read_directory_wraps_os_error(backend):
    with pytest.raises(StorageIOFailure) as exc:
        backend.read(backend.base_dir.as_posix())
    assert exc.value.details["operation"] == "read"
    assert isinstance(exc.value.cause, OSError)


def test_write_onto_directory_wraps_os_error(backend):
    with pytest.raises(StorageIOFailure) as exc:
        backend.write(backend.base_dir.as_posix(), "nope")
    assert exc.value.details["operation"] == "write"


def test_file_naming(backend):
    owner, topic = uuid.uuid4(), uuid.uuid4()
    assert backend.file_name(TrainingSubject.general(owner)) == f"{owner}-general.txt"
    assert backend.file_name(TrainingSubject.topic(owner, topic)) == f"{owner}-topic-{topic}.txt"
    assert backend.locate(TrainingSubject.general(owner)).startswith(backend.base_dir.as_posix() + "/")


def test_unencodable_write_leaves_existing_file_intact(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    backend.write(path, "hello")
    with pytest.raises(StorageIOFailure) as exc:
        backend.write(path, "bad \ud800")
    assert exc.value.details["operation"] == "write"
    assert isinstance(exc.value.cause, UnicodeEncodeError)
    assert backend.read(path) == "hello"


def test_read_undecodable_bytes_wraps_error(backend):
    path = backend.locate(TrainingSubject.general(uuid.uuid4()))
    with open(path, "wb") as fh:
        fh.write(b"\xff\xfe\xfa")
    with pytest.raises(StorageIOFailure) as exc:
        backend.read(path)
    assert exc.value.details["operation"] == "read"
    assert isinstance(exc.value.cause, UnicodeDecodeError)
