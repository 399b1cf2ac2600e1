import pytest
from typer.testing import CliRunner

from pe_stage.cli.main import cli_app

runner = CliRunner()

FILENAME = "product-2019.0.0.tar.gz"
COMMON = ["--filename", "product-:version.tar.gz", "-V", "2019.0.0"]


@pytest.fixture
def cache(tmp_path, cli_home):
    path = tmp_path / "cache"
    path.mkdir()
    return path


def test_list_empty_cache(cache):
    result = runner.invoke(cli_app, ["list", "--archive-dir", str(cache)])

    assert result.exit_code == 0
    assert "No installers available." in result.output


def test_list_shows_installers(cache):
    (cache / "a.tar.gz").touch()
    (cache / "b.tar.gz").touch()

    result = runner.invoke(cli_app, ["list", "--archive-dir", str(cache)])

    assert result.exit_code == 0
    assert "- a.tar.gz" in result.output
    assert "- b.tar.gz" in result.output


def test_list_uses_archive_dir_from_environment(cache, monkeypatch):
    (cache / "env.tar.gz").touch()
    monkeypatch.setenv("PE_STAGE_ARCHIVE_DIR", str(cache))

    result = runner.invoke(cli_app, ["list"])

    assert "- env.tar.gz" in result.output


def test_download_command(cache, requests_mock):
    requests_mock.get(f"https://example.com/pe/{FILENAME}", content=b"bytes")

    result = runner.invoke(cli_app, ["download", "--url", "https://example.com/pe", "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 0, result.output
    assert (cache / FILENAME).read_bytes() == b"bytes"
    assert "downloaded" in result.output


def test_download_command_uses_download_root_setting(cache, requests_mock, monkeypatch):
    monkeypatch.setenv("PE_STAGE_DOWNLOAD_ROOT", "https://mirror.example.com/pe")
    requests_mock.get(f"https://mirror.example.com/pe/{FILENAME}", content=b"mirror")

    result = runner.invoke(cli_app, ["download", "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 0, result.output
    assert (cache / FILENAME).read_bytes() == b"mirror"


def test_download_command_http_error_exits_nonzero(cache, requests_mock):
    requests_mock.get(f"https://example.com/pe/{FILENAME}", status_code=404)

    result = runner.invoke(cli_app, ["download", "--url", "https://example.com/pe", "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 1
    assert "404" in result.output
    assert not (cache / FILENAME).exists()


def test_download_without_source_lists_catalog(cache):
    result = runner.invoke(cli_app, ["download", "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 1
    assert "is not available" in result.output
    assert "No installers available." in result.output
    assert "no download source available" in result.output


def test_fetch_command_from_directory(cache, tmp_path):
    source = tmp_path / "installers"
    source.mkdir()
    (source / FILENAME).write_bytes(b"local")

    result = runner.invoke(cli_app, ["fetch", "--source", str(source), "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 0, result.output
    assert (cache / FILENAME).read_bytes() == b"local"


def test_fetch_command_unsupported_scheme(cache):
    result = runner.invoke(cli_app, ["fetch", "--source", "ftp://example.com", "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 1
    assert "Unsupported URI scheme" in result.output


def test_copy_then_unpack(cache, tmp_path, pe_tarball):
    source = tmp_path / "installers"
    pe_tarball(source / "pe.tar.gz")
    out = tmp_path / "out"

    copied = runner.invoke(cli_app, ["copy", str(source), "--filename", "pe.tar.gz", "--archive-dir", str(cache)])
    unpacked = runner.invoke(cli_app, ["unpack", str(out), "--filename", "pe.tar.gz", "--archive-dir", str(cache)])
    again = runner.invoke(cli_app, ["unpack", str(out), "--filename", "pe.tar.gz", "--archive-dir", str(cache)])

    assert copied.exit_code == 0, copied.output
    assert unpacked.exit_code == 0, unpacked.output
    assert (out / "pe" / "VERSION").exists()
    assert "already present" in again.output


def test_copy_is_idempotent(cache, tmp_path):
    (cache / FILENAME).write_bytes(b"cached")

    result = runner.invoke(cli_app, ["copy", str(tmp_path / "nowhere"), "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 0
    assert "already present" in result.output


def test_unpack_missing_installer_fails(cache, tmp_path):
    result = runner.invoke(cli_app, ["unpack", str(tmp_path / "out"), "--archive-dir", str(cache), *COMMON])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_releases_command(cli_home):
    result = runner.invoke(cli_app, ["releases", "2019.0.0"])

    assert result.exit_code == 0
    assert "2019.0.0" in result.output
    assert "ubuntu" in result.output


def test_releases_unknown_version(cli_home):
    result = runner.invoke(cli_app, ["releases", "1.2.3"])

    assert result.exit_code == 1
    assert "No release information" in result.output


def test_log_file_written_under_app_home(cache, cli_home):
    runner.invoke(cli_app, ["list", "--archive-dir", str(cache)])

    assert (cli_home / "logs").is_dir()


def test_bad_timeout_setting_is_reported_without_traceback(cache, monkeypatch):
    monkeypatch.setenv("PE_STAGE_HTTP_TIMEOUT", "soon")

    result = runner.invoke(cli_app, ["list", "--archive-dir", str(cache)])

    assert result.exit_code == 1
    assert "PE_STAGE_HTTP_TIMEOUT must be a number of seconds" in result.output
    assert "Traceback" not in result.output
    assert not isinstance(result.exception, ValueError)
