"""Shared fixtures for the Auto MAC Changer tests."""

import asyncio
import subprocess

import pytest

from core.errors import CommandError


class FakeCommandRunner:
    """
    Stand-in for ``CommandRunner`` that records every call.

    Each randomize hands out the next address in sequence. ``failures``
    maps ``(step, interface)`` to the exception that step should raise.
    """

    def __init__(self, failures=None, show_output=None, links_output="", links_delay=0):
        self.calls = []
        self.links_output = links_output
        self.links_delay = links_delay
        self.links_listed = 0
        self.failures = failures or {}
        self.show_output = show_output
        self.link_state = {}
        self.current = {}
        self._counter = 0

    def _maybe_fail(self, step, interface):
        error = self.failures.get((step, interface))
        if error is not None:
            raise error

    async def list_links(self):
        self.links_listed += 1
        if self.links_delay:
            await asyncio.sleep(self.links_delay)
        self._maybe_fail("list", None)
        return self.links_output

    async def set_link_state(self, interface, state):
        self.calls.append((state, interface))
        self._maybe_fail(state, interface)
        self.link_state[interface] = state

    async def randomize_mac(self, interface):
        self.calls.append(("randomize", interface))
        self._maybe_fail("randomize", interface)
        self._counter += 1
        self.current[interface] = "02:00:00:00:00:%02x" % self._counter
        return f"New MAC:       {self.current[interface]} (unknown)\n"

    async def show_mac(self, interface):
        self.calls.append(("show", interface))
        self._maybe_fail("show", interface)
        if self.show_output is not None:
            return self.show_output
        mac = self.current.get(interface, "00:11:22:33:44:55").upper()
        return (
            f"Current MAC:   {mac} (unknown)\n"
            "Permanent MAC: 00:11:22:33:44:55 (unknown)\n"
        )

    def interfaces_touched(self):
        seen = []
        for _, interface in self.calls:
            if interface not in seen:
                seen.append(interface)
        return seen


class FakeRun:
    """Stand-in for ``run_command`` returning canned output per command."""

    def __init__(self, outputs=None, errors=None):
        self.commands = []
        self.outputs = outputs or {}
        self.errors = errors or {}

    def __call__(self, cmd, check=True):
        self.commands.append(list(cmd))
        key = " ".join(cmd)
        if key in self.errors:
            error = self.errors[key]
            if isinstance(error, int):
                if check:
                    raise CommandError(cmd, error, "failed")
                return subprocess.CompletedProcess(cmd, error, "", "failed")
            raise error
        return subprocess.CompletedProcess(cmd, 0, self.outputs.get(key, ""), "")


@pytest.fixture
def fake_runner():
    return FakeCommandRunner()


@pytest.fixture
def fake_run():
    return FakeRun()


@pytest.fixture
def as_root(monkeypatch):
    monkeypatch.setattr("os.geteuid", lambda: 0)


@pytest.fixture
def as_user(monkeypatch):
    monkeypatch.setattr("os.geteuid", lambda: 1000)
