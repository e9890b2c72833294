import pytest

from sysinfo.modules.base import DiagnosticModule


class FakeModule(DiagnosticModule):
    """Module returning canned metrics or raising a canned error."""

    def __init__(self, name, title, metrics=None, error=None):
        super().__init__(name, title)
        self.metrics = list(metrics or [])
        self.error = error
        self.calls = 0

    def run(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.metrics)


@pytest.fixture
def fake_module():
    return FakeModule
