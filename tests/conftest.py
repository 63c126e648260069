import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `import archive` works in tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

ARCHIVE_ENV_VARS = (
    "ARCHIVE_COPY_BUFFER_SIZE",
    "ARCHIVE_STRICT_DIRS",
    "ARCHIVE_STRICT_LISTING",
    "ARCHIVE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_archive_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shells from leaking ARCHIVE_* knobs into tests."""

    for name in ARCHIVE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
