import logging

from jumpover.geometry import intersect
from jumpover.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from jumpover.scene import LineNode

logger = logging.getLogger("tests.logging_utils")


def test_debug_log_call_records_entry_and_exit(caplog):
    caplog.set_level(logging.DEBUG, logger="tests.logging_utils")

    @debug_log_call(logger)
    def add(a, b=1):
        return a + b

    assert add(2, b=3) == 5
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering ") and "args=[2]" in m and "b=3" in m for m in messages)
    assert any(m.endswith("-> 5") for m in messages)


def test_debug_log_call_is_not_applied_twice():
    def f():
        return 1

    wrapped = debug_log_call(logger)(f)
    assert debug_log_call(logger)(wrapped) is wrapped


def test_geometry_functions_are_wrapped(caplog):
    caplog.set_level(logging.DEBUG, logger="jumpover.geometry")
    intersect((0.0, 0.0), (1.0, 0.0), (1.0, -1.0), (0.0, 1.0))
    assert any(record.getMessage().startswith("Entering intersect") for record in caplog.records)


def test_apply_debug_logging_skips_private_names():
    namespace = {"__name__": "fake", "public": None, "_private": None}

    def public():
        return 1

    def _private():
        return 2

    public.__module__ = "fake"
    _private.__module__ = "fake"
    namespace["public"] = public
    namespace["_private"] = _private

    apply_debug_logging(namespace)

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private


def test_safe_repr_summarises_nodes():
    assert _safe_repr(LineNode(id="l1")) == "<LINE 'l1'>"
    assert _safe_repr(list(range(10))).endswith(", ...]")
