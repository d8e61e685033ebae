import json
import logging
import sys

from taf.logging_conf import JsonFormatter, get_logger, setup_logging


def _record(msg, **extra) -> logging.LogRecord:
    rec = logging.LogRecord("taf.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_formats_message_and_extras():
    out = json.loads(JsonFormatter().format(_record("comment.create", event="resource_create")))
    assert out["level"] == "INFO"
    assert out["logger"] == "taf.test"
    assert out["message"] == "comment.create"
    assert out["event"] == "resource_create"
    assert "ts" in out
    assert "lineno" not in out


def test_dict_message_is_merged():
    out = json.loads(JsonFormatter().format(_record({"event": "summary", "passed": 4})))
    assert out["event"] == "summary"
    assert out["passed"] == 4
    assert "message" not in out


def test_extras_do_not_override_core_keys():
    out = json.loads(JsonFormatter().format(_record("m", level="bogus")))
    assert out["level"] == "INFO"


def test_unserializable_extras_are_stringified():
    out = json.loads(JsonFormatter().format(_record("m", obj=object())))
    assert out["obj"].startswith("<object object")


def test_exception_info_included():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = logging.LogRecord(
            "taf.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    out = json.loads(JsonFormatter().format(rec))
    assert "ValueError: boom" in out["exc_info"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging()
    before = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == before


def test_get_logger_names():
    assert get_logger("taf.endpoint").name == "taf.endpoint"
    assert get_logger().name == "taf.logging_conf"


def test_standard_record_attributes_are_not_emitted():
    rec = _record("m", event="e")
    out = json.loads(JsonFormatter().format(rec))
    assert set(out) == {"ts", "level", "logger", "message", "event"}
