import os
from pathlib import Path

import pytest

from owner_resolver.logging.logger import Log

_SETTINGS_ENV = (
    "LOG_LEVEL",
    "LDAP_URL",
    "LDAP_BIND_DN",
    "LDAP_BIND_PASS",
    "LDAP_BASE_DN",
    "UID_READER",
    "TOPOLOGY",
    "TOPOLOGY_PROBE_PATH",
    "TOPOLOGY_PROBE_UID",
)


@pytest.fixture(autouse=True)
def _clean_settings_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep the developer's environment and any .env file out of Settings()."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture(autouse=True)
def _log_to_current_stderr() -> None:
    """Rebind the log handler so it never points at a stream closed by an earlier CliRunner."""
    Log.configure("DEBUG")


@pytest.fixture()
def data_dirs(tmp_path: Path) -> dict[str, str]:
    """Two project directories, a plain file and a missing path, as strings."""
    alice = tmp_path / "alice"
    bob = tmp_path / "bob"
    alice.mkdir()
    bob.mkdir()
    note = tmp_path / "notes.txt"
    note.write_text("not a directory")
    return {
        "alice": str(alice),
        "bob": str(bob),
        "file": str(note),
        "missing": os.path.join(str(tmp_path), "missing"),
    }
