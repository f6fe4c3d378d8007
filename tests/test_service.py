"""Tests for the service entry point and its shutdown handling."""

import asyncio
import json
import logging
import os
import signal

import pytest

from config.store import MacChangerConfig
from core.mac_cycler import MacCycler
from lifecycle.privileges import require_root
from orchestration import service
from orchestration.service import MacChangerService


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class StubScheduler:
    """Records calls instead of scheduling anything."""

    def __init__(self, fail=False):
        self.config = MacChangerConfig(interfaces=("eth0",))
        self.cycles = 0
        self.started = False
        self.stopped = False
        self.fail = fail

    async def cycle_all(self):
        self.cycles += 1
        if self.fail:
            raise RuntimeError("scheduler exploded")
        return {"eth0": True}

    def start(self):
        self.started = True

    def shutdown(self):
        self.stopped = True


def test_require_root_exits_for_normal_user(as_user, capsys):
    with pytest.raises(SystemExit) as excinfo:
        require_root("auto-mac-changer")
    assert excinfo.value.code == 1
    assert "This script must be run as root." in capsys.readouterr().err


def test_require_root_passes_for_root(as_root):
    require_root("auto-mac-changer")


def test_main_exits_cleanly_when_disabled(as_root, tmp_path, monkeypatch):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"interval": 300, "interfaces": ["eth0"], "enabled": False}))
    attempts = []

    async def record(self, interface):
        attempts.append(interface)
        return True

    monkeypatch.setattr(MacCycler, "change_mac", record)

    with pytest.raises(SystemExit) as excinfo:
        service.main(str(config_path), str(tmp_path / "service.log"))

    assert excinfo.value.code == 0
    assert attempts == []
    assert "Service is disabled in configuration" in (tmp_path / "service.log").read_text()


def test_main_requires_configuration(as_root, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        service.main(str(tmp_path / "missing.json"), str(tmp_path / "service.log"))

    assert excinfo.value.code == 1
    assert "Please run installation" in (tmp_path / "service.log").read_text()


def test_main_rejects_invalid_configuration(as_root, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"interval": 0}))

    with pytest.raises(SystemExit) as excinfo:
        service.main(str(config_path), str(tmp_path / "service.log"))

    assert excinfo.value.code == 1


def test_serve_runs_first_cycle_then_starts_scheduler_and_stops_on_sigterm(caplog):
    caplog.set_level("INFO")
    scheduler = StubScheduler()
    svc = MacChangerService(scheduler)

    async def run():
        asyncio.get_running_loop().call_later(0.05, os.kill, os.getpid(), signal.SIGTERM)
        return await svc.serve()

    code = asyncio.run(run())

    assert code == 0
    assert scheduler.cycles == 1
    assert scheduler.started
    assert scheduler.stopped
    assert "Service terminated" in caplog.text


def test_serve_stops_on_sigint_from_the_keyboard(caplog, capsys):
    caplog.set_level("INFO")
    scheduler = StubScheduler()
    svc = MacChangerService(scheduler)

    async def run():
        asyncio.get_running_loop().call_later(0.05, os.kill, os.getpid(), signal.SIGINT)
        return await svc.serve()

    code = asyncio.run(run())

    assert code == 0
    assert scheduler.started
    assert scheduler.stopped
    assert "Service stopped by user" in caplog.text
    assert "Service terminated" not in caplog.text
    assert "Stopping Auto MAC Changer service" in capsys.readouterr().out



def test_stop_releases_serve_immediately():
    scheduler = StubScheduler()
    svc = MacChangerService(scheduler)

    async def run():
        asyncio.get_running_loop().call_soon(svc.stop, "Service stopped by user")
        return await svc.serve()

    assert asyncio.run(run()) == 0
    assert scheduler.stopped


def test_startup_failure_exits_with_error(caplog):
    scheduler = StubScheduler(fail=True)
    svc = MacChangerService(scheduler)

    code = asyncio.run(svc.serve())

    assert code == 1
    assert not scheduler.started
    assert "Service error: scheduler exploded" in caplog.text
