"""
Tests for the declarative validation layer.

Covers the field predicates, failure accumulation, and the products
rule sets. Pure functions only; no application or store required.
"""

import pytest

from app.interfaces.catalog.rules import (
    CREATE_PRODUCT_RULES,
    EMPTY_NAME,
    EMPTY_PRICE,
    INVALID_AVAILABILITY,
    INVALID_ID,
    INVALID_NAME,
    NAME_MAX_LENGTH,
    NAME_TOO_LONG,
    NON_NUMERIC_PRICE,
    NON_POSITIVE_PRICE,
    UPDATE_PRODUCT_RULES,
    parse_create_command,
    parse_product_id,
    parse_update_command,
)
from app.shared.validation import (
    BODY,
    MISSING,
    PARAMS,
    RequestInput,
    RequestValidationFailed,
    ValidationFailure,
    as_text,
    check,
    collect_failures,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    is_string,
    max_length,
    not_empty,
    to_boolean,
)


class TestPredicates:
    """Tests for the individual field predicates."""

    @pytest.mark.parametrize("value", ["1", "0", "-3", "+42", "2000", 7])
    def test_is_int_accepts_integers(self, value) -> None:
        assert is_int(value)

    @pytest.mark.parametrize("value", ["not-valid-url", "", "01", "1.5", " 1", MISSING])
    def test_is_int_rejects_non_integers(self, value) -> None:
        assert not is_int(value)

    def test_is_string_only_accepts_str(self) -> None:
        assert is_string("")
        assert not is_string(5)
        assert not is_string(MISSING)

    @pytest.mark.parametrize("value", [MISSING, None, ""])
    def test_not_empty_rejects_absent_and_blank(self, value) -> None:
        assert not not_empty(value)

    def test_not_empty_accepts_zero_and_false(self) -> None:
        assert not_empty(0)
        assert not_empty(False)

    @pytest.mark.parametrize("value", [100, 0, -5, 1.5, "399", ".5", 100.0])
    def test_is_numeric_accepts_numbers(self, value) -> None:
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["hola", "", MISSING, None, True, "1,5", "1e3"])
    def test_is_numeric_rejects_non_numbers(self, value) -> None:
        assert not is_numeric(value)

    @pytest.mark.parametrize("value", [1, 0.01, "5", " 7 "])
    def test_is_positive_accepts_values_above_zero(self, value) -> None:
        assert is_positive(value)

    @pytest.mark.parametrize(
        "value",
        [0, -1, "0", "hola", "", MISSING, None, "nan", "inf", "9" * 400, 10**400, float("inf")],
    )
    def test_is_positive_rejects_the_rest(self, value) -> None:
        assert not is_positive(value)

    def test_max_length_counts_characters_of_the_text(self) -> None:
        within_three = max_length(3)

        assert within_three("abc")
        assert within_three(MISSING)
        assert within_three(123)
        assert not within_three("abcd")
        assert not within_three(1234)

    @pytest.mark.parametrize("value", [True, False, "true", "false", 1, 0, "1", "0"])
    def test_is_boolean_accepts_boolean_forms(self, value) -> None:
        assert is_boolean(value)

    @pytest.mark.parametrize("value", ["yes", 2, "", MISSING, None])
    def test_is_boolean_rejects_the_rest(self, value) -> None:
        assert not is_boolean(value)

    def test_to_boolean(self) -> None:
        assert to_boolean(True) is True
        assert to_boolean("1") is True
        assert to_boolean("false") is False
        assert to_boolean(0) is False

    def test_as_text_renders_json_values(self) -> None:
        assert as_text(MISSING) == ""
        assert as_text(None) == ""
        assert as_text(True) == "true"
        assert as_text(100.0) == "100"
        assert as_text(2.5) == "2.5"


class TestFailureAccumulation:
    """Tests for rule execution and failure records."""

    def test_all_rules_run_and_keep_order(self) -> None:
        rules = [
            check(BODY, "a", not_empty, "a empty"),
            check(BODY, "b", not_empty, "b empty"),
            check(BODY, "a", is_numeric, "a not numeric"),
        ]
        failures = collect_failures(rules, RequestInput(body={}))
        assert [f.msg for f in failures] == ["a empty", "b empty", "a not numeric"]

    def test_passing_rules_produce_no_failures(self) -> None:
        rules = [check(PARAMS, "id", is_int, INVALID_ID)]
        assert collect_failures(rules, RequestInput(params={"id": "3"})) == []

    def test_failure_dict_omits_absent_value(self) -> None:
        failure = ValidationFailure(msg="m", path="name", location=BODY)
        assert failure.to_dict() == {
            "type": "field",
            "msg": "m",
            "path": "name",
            "location": "body",
        }

    def test_failure_dict_keeps_present_value(self) -> None:
        failure = ValidationFailure(msg="m", path="price", location=BODY, value=None)
        assert failure.to_dict()["value"] is None


class TestProductRules:
    """Tests for the products rule sets."""

    def test_empty_create_body_yields_five_failures(self) -> None:
        failures = collect_failures(CREATE_PRODUCT_RULES, RequestInput(body={}))
        assert [f.msg for f in failures] == [
            INVALID_NAME,
            EMPTY_NAME,
            NON_NUMERIC_PRICE,
            EMPTY_PRICE,
            NON_POSITIVE_PRICE,
        ]

    def test_zero_price_fails_only_positive_check(self) -> None:
        body = {"name": "Monitor", "price": 0}
        failures = collect_failures(CREATE_PRODUCT_RULES, RequestInput(body=body))
        assert [f.msg for f in failures] == [NON_POSITIVE_PRICE]

    def test_text_price_fails_numeric_and_positive(self) -> None:
        body = {"name": "Monitor", "price": "hola"}
        failures = collect_failures(CREATE_PRODUCT_RULES, RequestInput(body=body))
        assert [f.msg for f in failures] == [NON_NUMERIC_PRICE, NON_POSITIVE_PRICE]

    def test_overlong_name_fails_only_length_check(self) -> None:
        body = {"name": "x" * (NAME_MAX_LENGTH + 1), "price": 10}
        failures = collect_failures(CREATE_PRODUCT_RULES, RequestInput(body=body))
        assert [f.msg for f in failures] == [NAME_TOO_LONG]

    def test_price_beyond_float_range_fails_positive_check(self) -> None:
        body = {"name": "Monitor", "price": "9" * 400}
        failures = collect_failures(CREATE_PRODUCT_RULES, RequestInput(body=body))
        assert [f.msg for f in failures] == [NON_POSITIVE_PRICE]

    def test_empty_update_body_yields_five_failures(self) -> None:
        request_input = RequestInput(params={"id": "1"}, body={})
        failures = collect_failures(UPDATE_PRODUCT_RULES, request_input)
        assert len(failures) == 5
        assert failures[-1].msg == INVALID_AVAILABILITY

    def test_update_reports_invalid_id_with_body_failures(self) -> None:
        request_input = RequestInput(params={"id": "abc"}, body={})
        failures = collect_failures(UPDATE_PRODUCT_RULES, request_input)
        assert failures[0].msg == INVALID_ID
        assert failures[0].location == PARAMS
        assert len(failures) == 6


class TestCommandParsing:
    """Tests for turning accepted input into commands."""

    def test_parse_product_id(self) -> None:
        assert parse_product_id("42") == 42

    def test_parse_product_id_rejects_text(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc_info:
            parse_product_id("not-valid")
        assert [f.msg for f in exc_info.value.failures] == [INVALID_ID]

    def test_parse_create_command_coerces_price(self) -> None:
        command = parse_create_command({"name": "Mouse", "price": "25.5"})
        assert command.name == "Mouse"
        assert command.price == 25.5

    def test_parse_create_command_ignores_availability(self) -> None:
        command = parse_create_command(
            {"name": "Mouse", "price": 10, "availability": False}
        )
        assert not hasattr(command, "availability")

    def test_parse_update_command_coerces_availability(self) -> None:
        command = parse_update_command(
            "3", {"name": "Mouse", "price": 10, "availability": "false"}
        )
        assert command.product_id == 3
        assert command.availability is False
        assert command.price == 10.0

    def test_parse_update_command_raises_with_all_failures(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc_info:
            parse_update_command("x", {"name": "", "price": -1, "availability": "no"})
        assert [f.msg for f in exc_info.value.failures] == [
            INVALID_ID,
            EMPTY_NAME,
            NON_POSITIVE_PRICE,
            INVALID_AVAILABILITY,
        ]
