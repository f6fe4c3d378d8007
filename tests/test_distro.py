"""Tests for distribution detection and macchanger installation."""

import pytest

from conftest import FakeRun
from core.errors import CommandError, UnsupportedDistributionError
from lifecycle.distro import detect_distribution, install_macchanger

NO_LSB = {"lsb_release -i": FileNotFoundError("lsb_release")}


def _only(*paths):
    return lambda path: path in paths


def test_detects_from_os_release(tmp_path):
    os_release = tmp_path / "os-release"
    os_release.write_text('NAME="Kali GNU/Linux"\nID=kali\nID_LIKE=debian\n')

    distro = detect_distribution(str(os_release), FakeRun(errors=NO_LSB), _only(str(os_release)))

    assert distro == "kali"


def test_falls_back_to_lsb_release(tmp_path):
    os_release = tmp_path / "os-release"
    os_release.write_text("ID=ubuntu\n")
    run = FakeRun(outputs={"lsb_release -i": "Distributor ID:\tParrot\n"})

    assert detect_distribution(str(os_release), run, _only(str(os_release))) == "parrot"


def test_falls_back_to_release_files(tmp_path):
    distro = detect_distribution(
        str(tmp_path / "missing"), FakeRun(errors=NO_LSB), _only("/etc/arch-release")
    )
    assert distro == "arch"


def test_unknown_distribution(tmp_path):
    run = FakeRun(outputs={"lsb_release -i": "Distributor ID:\tUbuntu\n"})
    assert detect_distribution(str(tmp_path / "missing"), run, _only()) is None


@pytest.mark.parametrize("distro,expected", [
    ("fedora", [["dnf", "install", "-y", "macchanger"]]),
    ("kali", [["apt-get", "update"], ["apt-get", "install", "-y", "macchanger"]]),
    ("parrot", [["apt-get", "update"], ["apt-get", "install", "-y", "macchanger"]]),
    ("arch", [["pacman", "-Sy", "--noconfirm", "macchanger"]]),
])
def test_install_macchanger_commands(distro, expected, fake_run):
    install_macchanger(distro, fake_run)
    assert fake_run.commands == expected


def test_install_macchanger_unsupported(fake_run):
    with pytest.raises(UnsupportedDistributionError):
        install_macchanger("gentoo", fake_run)
    assert fake_run.commands == []


def test_install_macchanger_stops_on_failure():
    run = FakeRun(errors={"apt-get update": 100})
    with pytest.raises(CommandError):
        install_macchanger("kali", run)
    assert run.commands == [["apt-get", "update"]]
