"""Tests for the loguru sink configuration."""

import sys

from paping.core.utils import log_config


class RecordingLogger:
    def __init__(self):
        self.sinks = []

    def remove(self):
        self.sinks.clear()

    def add(self, sink, **options):
        self.sinks.append((sink, options))


def test_debug_keeps_rotating_file_sink(monkeypatch):
    fake = RecordingLogger()
    monkeypatch.setattr(log_config, "logger", fake)

    log_config.enable_debug()

    sinks = dict(fake.sinks)
    assert sinks[sys.stderr]["level"] == "DEBUG"
    file_options = sinks[log_config.LOG_FILE]
    assert file_options == log_config.FILE_SINK_OPTIONS
    assert file_options["rotation"] == "10 MB"
    assert file_options["retention"] == "1 week"
    assert file_options["compression"] == "zip"


def test_default_console_level(monkeypatch):
    fake = RecordingLogger()
    monkeypatch.setattr(log_config, "logger", fake)

    log_config.configure()

    assert dict(fake.sinks)[sys.stderr]["level"] == "INFO"
    assert len(fake.sinks) == 2
