import pytest

from core.logger import RsvpLogger


class RecordingLogger(RsvpLogger):
    """Captures every call as (level, message, context)"""

    def __init__(self):
        self.calls = []

    def log(self, message, *context):
        self.calls.append(("log", message, context))

    def warn(self, message, *context):
        self.calls.append(("warn", message, context))

    def error(self, message, *context):
        self.calls.append(("error", message, context))

    def debug(self, message, *context):
        self.calls.append(("debug", message, context))

    def messages(self, level):
        return [message for lvl, message, _ in self.calls if lvl == level]

    def clear(self):
        self.calls.clear()


class NoDebugLogger:
    """Duck-typed logger without the optional debug method"""

    def __init__(self):
        self.calls = []

    def log(self, message, *context):
        self.calls.append(("log", message, context))

    def warn(self, message, *context):
        self.calls.append(("warn", message, context))

    def error(self, message, *context):
        self.calls.append(("error", message, context))


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def no_debug_logger():
    return NoDebugLogger()
