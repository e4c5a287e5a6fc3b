"""Tests for featurelifecycle/lib/usage.py - deprecated usage records."""

import dataclasses
import traceback

import pytest

from featurelifecycle.lib.errors import InvalidUsageDetailsError
from featurelifecycle.lib.stack import StackFrame
from featurelifecycle.lib.usage import (
    DeprecatedUsageDetails,
    DeprecatedUsageProgressDetails,
)

FRAME_1 = StackFrame(filename="build.py", lineno=10, function="main", module="build")
FRAME_2 = StackFrame(filename="plugin.py", lineno=42, function="apply", module="plugin")


def make_usage(stack_trace=(FRAME_1, FRAME_2), **overrides):
    values = {
        "message": "Method foo() is deprecated.",
        "details": "This method will be removed in the next major version.",
        "advice": "Use bar() instead.",
        "stack_trace": stack_trace,
    }
    values.update(overrides)
    return DeprecatedUsageProgressDetails(**values)


class TestConstruction:
    """Tests for building usage records."""

    def test_fields_round_trip(self):
        """Each attribute returns exactly what was passed in."""
        usage = DeprecatedUsageProgressDetails(
            "Method foo() is deprecated.",
            "This method will be removed in the next major version.",
            "Use bar() instead.",
            [FRAME_1, FRAME_2],
        )

        assert usage.message == "Method foo() is deprecated."
        assert usage.details == "This method will be removed in the next major version."
        assert usage.advice == "Use bar() instead."
        assert usage.stack_trace == (FRAME_1, FRAME_2)

    def test_empty_advice_and_stack_trace(self):
        """Empty advice and an empty stack trace are accepted as-is."""
        usage = make_usage(stack_trace=[], advice="")

        assert usage.advice == ""
        assert usage.stack_trace == ()
        assert usage.stack_trace is not None

    def test_empty_message_is_not_rejected(self):
        """No content validation is applied to text fields."""
        usage = make_usage(message="", details="")
        assert usage.message == ""
        assert usage.details == ""

    @pytest.mark.parametrize("field", ["message", "details", "advice", "stack_trace"])
    def test_none_field_is_rejected(self, field):
        """None is a precondition failure for every field."""
        with pytest.raises(InvalidUsageDetailsError) as exc_info:
            make_usage(**{field: None})
        assert exc_info.value.field == field

    def test_all_fields_required(self):
        """There are no defaults; every field must be supplied."""
        with pytest.raises(TypeError):
            DeprecatedUsageProgressDetails("message", "details", "advice")

    def test_frame_descriptors_stored_as_given(self):
        """Frames are opaque; the same objects come back."""
        opaque = object()
        usage = make_usage(stack_trace=[opaque])
        assert usage.stack_trace[0] is opaque

    def test_frame_summary_stored_as_stack_frame(self):
        """FrameSummary entries are converted so the record stays hashable."""
        summary = traceback.FrameSummary("tool.py", 7, "run", line="run()")
        usage = make_usage(stack_trace=[summary])

        assert usage.stack_trace == (
            StackFrame(filename="tool.py", lineno=7, function="run", line="run()"),
        )
        assert hash(usage) == hash(make_usage(stack_trace=[summary]))

    @pytest.mark.parametrize("text", ["abc", b"abc"])
    def test_text_stack_trace_is_rejected(self, text):
        """A string is not split into single-character frames."""
        with pytest.raises(InvalidUsageDetailsError) as exc_info:
            make_usage(stack_trace=text)
        assert exc_info.value.field == "stack_trace"
        assert "not text" in str(exc_info.value)


class TestImmutability:
    """Tests for the record never changing after construction."""

    def test_fields_cannot_be_reassigned(self):
        usage = make_usage()
        for name in ("message", "details", "advice", "stack_trace"):
            with pytest.raises(dataclasses.FrozenInstanceError):
                setattr(usage, name, "changed")

    def test_stack_trace_is_copied_on_construction(self):
        """Mutating the caller's list after construction has no effect."""
        frames = [FRAME_1]
        usage = make_usage(stack_trace=frames)

        frames.append(FRAME_2)
        frames[0] = FRAME_2

        assert usage.stack_trace == (FRAME_1,)

    def test_stack_trace_is_a_tuple(self):
        """The stored stack trace is an immutable sequence."""
        usage = make_usage(stack_trace=[FRAME_1, FRAME_2])
        assert isinstance(usage.stack_trace, tuple)

    def test_repeated_reads_are_identical(self):
        usage = make_usage()
        assert usage.message is usage.message
        assert usage.stack_trace is usage.stack_trace
        assert usage.to_dict() == usage.to_dict()


class TestEquality:
    """Tests for value equality."""

    def test_equal_values_are_equal(self):
        """Records with equal fields compare equal but are distinct objects."""
        first = make_usage(stack_trace=[FRAME_1, FRAME_2])
        second = make_usage(stack_trace=(FRAME_1, FRAME_2))

        assert first == second
        assert first is not second
        assert hash(first) == hash(second)

    def test_different_advice_not_equal(self):
        assert make_usage() != make_usage(advice="Use baz() instead.")

    def test_usable_as_set_member(self):
        """Hashable records can be grouped by listeners."""
        usages = {make_usage(), make_usage(), make_usage(message="Other")}
        assert len(usages) == 2


class TestAccessors:
    """Tests for derived accessors."""

    def test_warning_alias(self):
        usage = make_usage(details="Will be removed in 9.0")
        assert usage.warning == "Will be removed in 9.0"

    def test_location_is_innermost_frame(self):
        usage = make_usage(stack_trace=[FRAME_1, FRAME_2])
        assert usage.location == FRAME_2

    def test_location_without_stack_trace(self):
        assert make_usage(stack_trace=[]).location is None

    def test_format_joins_parts(self):
        usage = make_usage()
        assert usage.format() == (
            "Method foo() is deprecated. "
            "This method will be removed in the next major version. "
            "Use bar() instead."
        )

    def test_format_skips_empty_parts(self):
        usage = make_usage(details="", advice="  ")
        assert usage.format() == "Method foo() is deprecated."

    def test_format_non_text_parts(self):
        """Values that are not strings are rendered with str()."""
        usage = make_usage(message=1, details="", advice="Use bar()")
        assert usage.format() == "1 Use bar()"

    def test_satisfies_shared_capability(self):
        """The record exposes the message and stack trace capability."""
        assert isinstance(make_usage(), DeprecatedUsageDetails)


class TestSerialization:
    """Tests for to_dict / from_dict."""

    def test_to_dict(self):
        data = make_usage(stack_trace=[FRAME_1]).to_dict()

        assert data["message"] == "Method foo() is deprecated."
        assert data["details"] == "This method will be removed in the next major version."
        assert data["advice"] == "Use bar() instead."
        assert data["stack_trace"] == [
            {
                "filename": "build.py",
                "lineno": 10,
                "function": "main",
                "module": "build",
                "line": None,
            }
        ]

    def test_from_dict_restores_record(self):
        usage = make_usage()
        assert DeprecatedUsageProgressDetails.from_dict(usage.to_dict()) == usage

    def test_from_dict_accepts_warning_key(self):
        """Payloads using the older 'warning' field name still load."""
        usage = DeprecatedUsageProgressDetails.from_dict(
            {"message": "m", "warning": "w", "advice": "a", "stack_trace": []}
        )
        assert usage.details == "w"

    def test_frame_summary_serialized(self):
        summary = traceback.FrameSummary("tool.py", 7, "run", line="run()")
        data = make_usage(stack_trace=[summary]).to_dict()

        assert data["stack_trace"] == [
            {
                "filename": "tool.py",
                "lineno": 7,
                "function": "run",
                "module": None,
                "line": "run()",
            }
        ]

    def test_frame_summary_round_trip(self):
        """Records built from FrameSummary frames survive to_dict/from_dict."""
        summary = traceback.FrameSummary("tool.py", 7, "run", line="run()")
        usage = make_usage(stack_trace=[summary])

        assert DeprecatedUsageProgressDetails.from_dict(usage.to_dict()) == usage

    def test_opaque_frame_serialized_as_string(self):
        data = make_usage(stack_trace=["at Foo.bar(Foo.java:12)"]).to_dict()
        assert data["stack_trace"] == ["at Foo.bar(Foo.java:12)"]
