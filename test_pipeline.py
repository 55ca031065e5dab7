"""Unit tests for Pipeline.run and friends.

Run with ``pytest``.
"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from tinypipe import Pipeline, ConfigurationError, Some, Nothing
from tinypipe.steps import strip, reject_empty, split_space_max, upcase, field_first


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

LOG_LINE = "2022-11-19T17:34:05.299295Z  25888 INFO loading configuration from ./config.yml\n"


def build_record(fields):
    return {
        "timestamp": datetime.fromisoformat(fields[0].replace("Z", "+00:00")),
        "process_id": int(fields[1]),
        "log_level": fields[2].lower(),
        "log_line": fields[3],
    }


def identity(x):
    return x


def append_marker(items):
    items.append("marker")
    return items


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

def test_empty_pipeline_returns_equal_copy():
    """No steps: result equals the input but is a different object."""
    item = [1, 2, 3]
    result = Pipeline([]).run(item)
    assert result == item
    assert result is not item


def test_identity_steps_return_input():
    assert Pipeline([identity, identity, identity]).run({"a": 1}) == {"a": 1}
    assert Pipeline([identity]).run("line") == "line"


def test_steps_run_in_declared_order():
    add_one = lambda x: x + 1
    double = lambda x: x * 2
    assert Pipeline([add_one, double]).run(3) == 8
    assert Pipeline([double, add_one]).run(3) == 7


def test_none_short_circuits_remaining_steps():
    """A step returning None stops the run; later steps are never invoked."""
    first = Mock(return_value="a")
    stopper = Mock(return_value=None)
    probe = Mock(return_value="never")

    result = Pipeline([first, stopper, probe]).run("input")

    assert result is None
    first.assert_called_once_with("input")
    stopper.assert_called_once_with("a")
    probe.assert_not_called()


def test_each_step_called_once_per_run():
    step = Mock(side_effect=lambda x: x)
    pipeline = Pipeline([step])
    pipeline.run(1)
    pipeline.run(2)
    assert step.call_count == 2


def test_none_input_returns_none_without_calling_steps():
    probe = Mock()
    assert Pipeline([probe]).run(None) is None
    probe.assert_not_called()


def test_input_is_not_mutated():
    item = ["a", "b"]
    result = Pipeline([append_marker]).run(item)
    assert item == ["a", "b"]
    assert result == ["a", "b", "marker"]


def test_shallow_copy_shares_nested_values():
    item = {"tags": ["x"]}

    def tag(record):
        record["tags"].append("y")
        record["new"] = True
        return record

    Pipeline([tag]).run(item)
    assert "new" not in item
    assert item["tags"] == ["x", "y"]


def test_deep_copy_protects_nested_values():
    item = {"tags": ["x"]}

    def tag(record):
        record["tags"].append("y")
        return record

    result = Pipeline([tag], copy_mode="deep").run(item)
    assert item == {"tags": ["x"]}
    assert result == {"tags": ["x", "y"]}


def test_unknown_copy_mode_is_rejected():
    with pytest.raises(ConfigurationError):
        Pipeline([identity], copy_mode="none")


def test_step_exceptions_propagate_unchanged():
    def explode(_):
        raise KeyError("missing")

    probe = Mock()
    with pytest.raises(KeyError):
        Pipeline([explode, probe]).run("x")
    probe.assert_not_called()


def test_non_callable_step_fails_on_run():
    pipeline = Pipeline([42])
    with pytest.raises(TypeError):
        pipeline.run("x")


def test_log_line_to_record():
    pipeline = Pipeline([strip, split_space_max(4), build_record])

    assert pipeline.run(LOG_LINE) == {
        "timestamp": datetime(2022, 11, 19, 17, 34, 5, 299295, tzinfo=timezone.utc),
        "process_id": 25888,
        "log_level": "info",
        "log_line": "loading configuration from ./config.yml",
    }


def test_filter_pipeline():
    pipeline = Pipeline([strip, reject_empty])
    assert pipeline.run("   ") is None
    assert pipeline.run("x") == "x"


def test_run_maybe():
    pipeline = Pipeline([strip, reject_empty])
    assert pipeline.run_maybe(" x ") == Some("x")
    assert pipeline.run_maybe("  ") == Nothing


def test_run_all_keeps_order_and_absent_results():
    pipeline = Pipeline([strip, reject_empty, upcase])
    lines = ["a\n", "\n", " b "]
    assert list(pipeline.run_all(lines)) == ["A", None, "B"]
    assert list(pipeline.run_all(lines, drop_absent=True)) == ["A", "B"]


def test_run_all_is_lazy():
    probe = Mock(side_effect=lambda x: x)
    results = Pipeline([probe]).run_all(iter([1, 2, 3]))
    probe.assert_not_called()
    assert next(results) == 1
    assert probe.call_count == 1


def test_pipeline_is_a_step():
    inner = Pipeline([strip, upcase])
    outer = Pipeline([inner, reject_empty])
    assert outer.run(" hi ") == "HI"
    assert inner(" hi ") == "HI"


def test_steps_are_fixed_at_construction():
    steps = [upcase]
    pipeline = Pipeline(steps)
    steps.append(reject_empty)
    assert pipeline.steps == (upcase,)
    assert len(pipeline) == 1


def test_add_returns_new_pipeline():
    first = Pipeline([strip])
    second = Pipeline([upcase])
    combined = first + second

    assert combined.steps == (strip, upcase)
    assert first.steps == (strip,)
    assert (first + [reject_empty]).steps == (strip, reject_empty)
    assert combined.run(" ok ") == "OK"


def test_repr_lists_step_names():
    pipeline = Pipeline([strip, upcase], name="shout")
    assert repr(pipeline) == "Pipeline(name='shout', copy_mode='shallow', steps=[strip, upcase])"


def test_file_handles_are_passed_through(tmp_path):
    """Objects that cannot be copied reach the first step as-is."""
    path = tmp_path / "app.log"
    path.write_text("first line\nsecond line\n")
    pipeline = Pipeline([list, field_first, strip])

    with open(path, "r", encoding="utf-8") as f:
        assert pipeline.run(f) == "first line"

    with open(path, "r", encoding="utf-8") as f:
        assert Pipeline([list], copy_mode="deep").run(f) == ["first line\n", "second line\n"]


def test_generators_are_passed_through():
    pipeline = Pipeline([list, field_first])
    assert pipeline.run(x for x in "ab") == "a"
    assert pipeline.run(x for x in "") is None


def test_add_rejects_strings():
    pipeline = Pipeline([strip])
    with pytest.raises(TypeError):
        pipeline + "abc"
    with pytest.raises(TypeError):
        pipeline + b"abc"


def test_add_derives_name():
    combined = Pipeline([strip], name="clean") + Pipeline([upcase], name="shout")
    assert combined.name == "clean+shout"
    assert (Pipeline([strip], name="clean") + [upcase]).name == "clean+steps"
