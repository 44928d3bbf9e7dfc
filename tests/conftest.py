import pytest

from orgchart_desktop.runtime.schema import SaveDialogOptions


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: exercises real filesystem writes end to end")


class FakeDialog:
    """Records every prompt and answers with a fixed path (or raises)."""

    def __init__(self, answer="", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def save_file(self, options: SaveDialogOptions) -> str:
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_dialog_factory():
    def _make(answer="", error=None):
        return FakeDialog(answer=answer, error=error)

    return _make
