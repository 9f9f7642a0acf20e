import pytest


class FakeRunner:
    """Stands in for run_command: records calls and replays canned output."""

    def __init__(self, *outputs: str):
        self.outputs = list(outputs)
        self.calls = []

    def __call__(self, argv, cwd=None, timeout=None, display=None):
        self.calls.append({"argv": argv, "cwd": cwd, "timeout": timeout, "display": display})
        return self.outputs.pop(0) if self.outputs else ""


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def source_file(tmp_path):
    """Factory writing a source file into a temporary directory."""

    def _make(name: str, content: str = "") -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _make
