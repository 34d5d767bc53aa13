"""Tests for logging helpers and trace id context."""
from __future__ import annotations

import logging

from kicks_match.core.logging_config import ErrorOnlyFilter, TraceIdFilter, rotated_log_name
from kicks_match.core.trace_context import (
    clear_trace_id,
    generate_trace_id,
    get_trace_id,
    set_trace_id,
)


def _record(level=logging.INFO):
    return logging.LogRecord("test", level, __file__, 1, "msg", None, None)


def test_rotated_log_name():
    assert rotated_log_name("logs/app-info.log.2024-12-23") == "logs/app-info-2024-12-23.log"
    assert rotated_log_name("logs/app-error.log") == "logs/app-error.log"


def test_trace_id_filter_uses_context():
    record = _record()
    clear_trace_id()
    TraceIdFilter().filter(record)
    assert record.trace_id == "N/A"

    set_trace_id("abc123")
    try:
        TraceIdFilter().filter(record)
        assert record.trace_id == "abc123"
    finally:
        clear_trace_id()
    assert get_trace_id() is None


def test_error_only_filter():
    assert ErrorOnlyFilter().filter(_record(logging.ERROR))
    assert not ErrorOnlyFilter().filter(_record(logging.WARNING))


def test_generate_trace_id_shape():
    trace_id = generate_trace_id()
    assert len(trace_id) == 22
    assert trace_id != generate_trace_id()
