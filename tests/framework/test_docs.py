"""Tests for ``funcspec.framework.docs``."""

from funcspec.core.types import ABSENT
from funcspec.core.validator import make_validator
from funcspec.framework.docs import build_doc, describe_entry


class TestBuildDoc:
    def test_layout(self):
        doc = build_doc("add", "Add two numbers", [0, 0])
        assert doc == (
            "function: add\n"
            "description: Add two numbers\n"
            "parameters:\n"
            "\t0: {number}\n"
            "\t1: {number}\n"
        )

    def test_parameter_names(self):
        doc = build_doc("greet", "", ["hi", ABSENT], ["greeting", "name"])
        assert "\t0 greeting: {string}\n" in doc
        assert "\t1 name: {undefined}\n" in doc

    def test_more_entries_than_names(self):
        doc = build_doc("f", "", [1, 2], ["a"])
        assert "\t1: {number}" in doc

    def test_no_parameters(self):
        assert build_doc("noop", "", []) == "function: noop\ndescription: \nparameters:\n"


class TestDescribeEntry:
    def test_validator(self):
        v = make_validator(0, lambda n: n >= 0)
        assert describe_entry(v) == "{number} (validated)"

    def test_literals(self):
        assert describe_entry([1]) == "{array}"
        assert describe_entry(None) == "{null}"
