import pytest


class FakeRunner:
    """Stands in for ShellRunner: canned first lines keyed by command."""

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def run(self, command):
        self.calls.append(command)
        return self.outputs.get(command, "")


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def host_env(monkeypatch):
    from sysbanner import config

    monkeypatch.setattr(config, "USER", "alice")
    monkeypatch.setattr(config, "HOSTNAME", "box")
    monkeypatch.setattr(config, "SHELL", "/bin/zsh")
    monkeypatch.setattr(config, "OS", "Debian GNU/Linux 12 (bookworm)")


@pytest.fixture
def canned_outputs():
    return {
        "uname -sr": "Linux 6.1.0-18-amd64",
        "uptime -p": "up 3 hours, 21 minutes",
        "cat /sys/devices/virtual/dmi/id/product_name": "ThinkPad X1",
        "cat /sys/devices/virtual/dmi/id/product_version": "Gen 9",
        "free -m | awk 'NR==2{print $3, $2}'": "2048 8192",
        "pacman -Qe | wc -l": "812",
    }
