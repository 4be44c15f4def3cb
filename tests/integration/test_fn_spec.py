"""End-to-end behaviour of specified functions through the public API.

Covers the common usage scenarios: literal defaults,
validators, variadic functions and signature defaults, all driven through
``funcspec.spec`` and ``funcspec.validator`` as a caller would.
"""

import pytest

import funcspec
from funcspec import ABSENT


def add(a, b):
    return a + b


class TestTwoLiteralsTwoParams:
    @pytest.fixture
    def specd_add(self):
        return funcspec.spec([0, 0], add)

    def test_defaults_when_no_args(self, specd_add):
        assert specd_add() == 0

    def test_missing_second(self, specd_add):
        assert specd_add(1) == 1

    def test_missing_first(self, specd_add):
        assert specd_add(ABSENT, 1) == 1

    def test_both_used(self, specd_add):
        assert specd_add(1, 2) == 3


class TestOneLiteralTwoParams:
    @pytest.fixture
    def specd_add(self):
        return funcspec.fn([0], add)

    def test_sums_two_args(self, specd_add):
        assert specd_add(3, 4) == 7

    def test_unspecified_param_left_missing(self, specd_add):
        with pytest.raises(TypeError, match="missing 1 required positional argument"):
            specd_add(3)


class TestVariadic:
    def test_adds_all_args(self):
        specd_sum = funcspec.spec([], lambda *args: sum(args))
        assert specd_sum(1, 2, 3) == 6

    def test_literals_fill_leading_positions(self):
        specd_sum = funcspec.spec([10, 20], lambda *args: sum(args))
        assert specd_sum() == 30
        assert specd_sum(1) == 21
        assert specd_sum(1, 2, 3) == 6


class TestSignatureDefaults:
    def test_signature_default_used_for_unspecified(self):
        g = funcspec.spec([0], lambda a, b=0: a + b)
        assert g(3, 4) == 7
        assert g(3) == 3
        assert g() == 0

    def test_literal_wins_over_signature_default(self):
        h = funcspec.spec([0, 0], lambda a, b=1: a + b)
        assert h() == 0


class TestValidators:
    @pytest.fixture
    def specd_add(self):
        natural = funcspec.validator(0, lambda n: n >= 0 and int(n) == n)
        return funcspec.spec([natural, natural], lambda a, b: a + b)

    @pytest.mark.parametrize(
        "args, expected",
        [
            ((), 0),
            ((1,), 1),
            ((ABSENT, 1), 1),
            ((1, 2), 3),
            ((-1, 2), 2),
            ((2, -1), 2),
            ((-1, -1), 0),
            ((1.5, 2), 2),
            (("1", 2), 2),
        ],
    )
    def test_resolution(self, specd_add, args, expected):
        assert specd_add(*args) == expected


class TestConstruction:
    def test_literal_count_exceeds_params(self):
        def mock(a):
            pass

        with pytest.raises(
            funcspec.ArityError,
            match="literalArray length does not match # of params in function-definition",
        ):
            funcspec.fn([1, 2], mock)

    def test_matching_count_calls_through(self):
        def mock(a):
            return a

        assert funcspec.fn([1], mock)() == 1

    def test_validator_properties(self):
        v1 = funcspec.validator(1, lambda arg: True)
        assert v1.is_validator is True
        assert v1.expected_type == "number"
        assert v1.literal == 1

        v2 = funcspec.validator("hi", lambda arg: True)
        assert v2.expected_type == "string"
        assert v2.literal == "hi"

    def test_validator_null_literal(self):
        with pytest.raises(ValueError, match="expects non-null type argument at index 0"):
            funcspec.validator(None, lambda arg: True)

    def test_validator_not_callable(self):
        with pytest.raises(TypeError, match="expects function type argument at index 1"):
            funcspec.validator(1, True)

    def test_validator_rejects_own_literal(self):
        with pytest.raises(ValueError, match=r"returns \{boolean\} true"):
            funcspec.validator(1, lambda arg: isinstance(arg, str))


class TestDocumentedWorkflow:
    def test_decorated_function(self):
        @funcspec.specify(
            [funcspec.natural(1), funcspec.validator("info", funcspec.non_empty_str)],
            description="Repeat a label",
        )
        def repeat(times, label):
            return [label] * times

        assert repeat() == ["info"]
        assert repeat(2, "x") == ["x", "x"]
        assert repeat(-2, "   ") == ["info"]
        assert repeat.doc.splitlines() == [
            "function: repeat",
            "description: Repeat a label",
            "parameters:",
            "\t0 times: {number} (validated)",
            "\t1 label: {string} (validated)",
        ]

    def test_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("FUNCSPEC_STRICT", "1")
        strict_add = funcspec.wrap([0, 0], add)
        assert strict_add(1) == 1
        with pytest.raises(funcspec.InvalidArgumentError, match="expected argument type number at index 0"):
            strict_add("1", 2)
