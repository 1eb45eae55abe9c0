import io
import sys

import pytest


# replaces standard input with the given text for the duration of a test
@pytest.fixture
def stdin(monkeypatch):
    def set_stdin(text: str) -> io.StringIO:
        stream = io.StringIO(text)
        monkeypatch.setattr(sys, 'stdin', stream)
        return stream

    return set_stdin
