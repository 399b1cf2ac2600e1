import io
import tarfile
from pathlib import Path

import pytest

from pe_stage.kernel.contracts import Environment
from tests.kernel.mocks import RecordingUI


@pytest.fixture
def archive_dir(tmp_path):
    """An empty installer cache directory."""
    path = tmp_path / "pe_builds"
    path.mkdir()
    return path


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def env(ui, archive_dir):
    return Environment(ui=ui, archive_dir=archive_dir)


@pytest.fixture
def make_tarball():
    """
    Builds a gzip tarball at ``path`` from a mapping of member name to file
    content. Names ending in '/' become directories.
    """
    def _make(path: Path, members: dict) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(path, "w:gz") as tar:
            for name, content in members.items():
                info = tarfile.TarInfo(name.rstrip("/"))
                if name.endswith("/"):
                    info.type = tarfile.DIRTYPE
                    info.mode = 0o755
                    tar.addfile(info)
                else:
                    info.size = len(content)
                    info.mode = 0o644
                    tar.addfile(info, io.BytesIO(content))
        return path

    return _make


@pytest.fixture
def pe_tarball(make_tarball):
    """Factory for a valid installer with a single top-level ``pe/`` directory."""
    def _make(path: Path) -> Path:
        return make_tarball(path, {
            "pe/": b"",
            "pe/puppet-enterprise-installer": b"#!/bin/bash\necho install\n",
            "pe/VERSION": b"2019.0.0\n",
        })

    return _make


@pytest.fixture
def cli_home(tmp_path, monkeypatch):
    """Points the application data directory at a temporary location."""
    home = tmp_path / "home"
    monkeypatch.setenv("PE_STAGE_HOME", str(home))
    for name in ("PE_STAGE_ARCHIVE_DIR", "PE_STAGE_VERSION", "PE_STAGE_FILENAME",
                 "PE_STAGE_DOWNLOAD_ROOT", "PE_STAGE_HTTP_TIMEOUT", "PE_STAGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return home
