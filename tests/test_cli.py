import signal

import pytest
from click.testing import CliRunner

from browser_telemetry.cli import runner
from browser_telemetry.cli.runner import cli, install_shutdown_handlers


def test_info_prints_configuration(monkeypatch) -> None:
    monkeypatch.setenv("CAPTURE_MAX_CLICKS", "7")
    result = CliRunner().invoke(cli, ["info"])
    assert result.exit_code == 0, result.output


def test_serve_help_lists_options() -> None:
    result = CliRunner().invoke(cli, ["serve", "--help"])
    assert result.exit_code == 0
    assert "--headless" in result.output
    assert "--user-data-dir" in result.output


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output


@pytest.fixture
def restore_sigterm():
    previous = signal.getsignal(signal.SIGTERM)
    yield
    signal.signal(signal.SIGTERM, previous)


def test_sigterm_raises_keyboard_interrupt(restore_sigterm) -> None:
    install_shutdown_handlers()
    assert signal.getsignal(signal.SIGTERM) is signal.default_int_handler


def test_serve_installs_handler_before_running(restore_sigterm, monkeypatch, tmp_path) -> None:
    seen = {}

    class StoppedServer:
        def run(self, transport):
            seen["transport"] = transport
            seen["handler"] = signal.getsignal(signal.SIGTERM)
            raise KeyboardInterrupt

    monkeypatch.setenv("BROWSER_USER_DATA_DIR", str(tmp_path / "profile"))
    monkeypatch.setattr(runner, "build_server", lambda *args, **kwargs: StoppedServer())

    result = CliRunner().invoke(cli, ["serve", "--headless"])

    assert result.exit_code == 0, result.output
    assert seen == {"transport": "stdio", "handler": signal.default_int_handler}
