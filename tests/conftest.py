import logging

import pytest


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [record.getMessage() for record in self.records]


@pytest.fixture
def record_logs():
    """Attach a recording handler to a package logger; package loggers do not propagate by default."""
    attached = []

    def _attach(logger):
        handler = _RecordingHandler()
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler

    yield _attach

    for logger, handler in attached:
        logger.removeHandler(handler)
