import logging

from infrastructure.observability import (
    clear_split_context,
    get_log_context,
    make_run_tag,
    set_log_context,
)
from infrastructure.observability.logging import ContextInjectFilter


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("run-1") == make_run_tag("run-1")
    assert make_run_tag("run-1") != make_run_tag("run-2")
    assert len(make_run_tag("run-1")) == 8


def test_filter_injects_run_and_split() -> None:
    set_log_context(run_id_full="run-xyz", split_id=7, strategy="k_fold", classifier="majority")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

    assert ContextInjectFilter().filter(record) is True
    assert record.run == make_run_tag("run-xyz")
    assert record.split == "007"

    ctx = get_log_context()
    assert ctx["strategy"] == "k_fold"
    assert ctx["classifier"] == "majority"

    clear_split_context()
    assert get_log_context()["split_id"] == "-"
    assert get_log_context()["run_id_full"] == "run-xyz"
