import pytest

from deploy_archive.config import reset_config
from deploy_archive.status import Status

TESTDATA_FILES = [
    "nested-dirs/dir1/file.txt",
    "nested-dirs/dir1/nested-dir1/file.txt",
    "nested-dirs/dir1/nested-dir1/nested-nested-dir1/file1.txt",
    "nested-dirs/dir1/nested-dir1/nested-nested-dir1/file2.txt",
    "nested-dirs/dir1/nested-dir1/nested-nested-dir1/file3.txt",
    "nested-dirs/dir2/file1.txt",
    "nested-dirs/dir2/file2.txt",
    "nested-dirs/file.txt",
    "nested-dirs/ignore/file.txt",
    "nested-dirs/ignore/sub/file1.txt",
    "nested-dirs/nested-dirs.zip",
    "only-files/file1.txt",
    "only-files/file2.txt",
    "only-files/file3.txt",
    "only-files/file4.txt",
]

TESTDATA_EMPTY_DIRS = [
    "only-dirs/a/b",
    "only-dirs/c",
]


class RecordingStatus(Status):
    """Keeps every update and step in memory"""

    def __init__(self):
        self.updates = []
        self.steps = []
        self.closed = False

    def update(self, message):
        self.updates.append(message)

    def step(self, state, message):
        self.steps.append((state, message))

    def close(self):
        self.closed = True


@pytest.fixture
def testdata(tmp_path):
    """Materialize the fixture tree; each file holds its own relative path."""
    root = tmp_path / "testdata"
    for rel in TESTDATA_FILES:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(rel.encode("utf-8"))
    for rel in TESTDATA_EMPTY_DIRS:
        (root / rel).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    for var in ("LOG_LEVEL", "DEBUG", "ARCHIVE_WORK_DIR"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def status():
    return RecordingStatus()
