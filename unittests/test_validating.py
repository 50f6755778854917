import logging
from typing import Optional

import pytest

from fvframework import Invalid, OptionalValidating, Valid, Validating, Validator, zip_validated
from fvframework.builtin import is_at_least, is_equal_to, is_even, is_greater_than, is_less_than, its_length
from fvframework.validator import its


class TestValidating:
    def test_revalidates_when_value_changes(self):
        validated_int = Validating(0, is_even)
        assert validated_int.is_valid()

        validated_int.value = 1
        assert not validated_int.is_valid()
        assert validated_int.errors() == ("must be even",)

        validated_int.value = 2
        assert validated_int.is_valid()
        assert validated_int.errors() is None
        assert validated_int.result == Valid(2)

    def test_reading_the_result_does_not_revalidate(self):
        calls = []

        def check(value):
            calls.append(value)
            return Valid(value)

        binding = Validating(1, Validator(check))
        assert calls == [1]
        _ = binding.result
        _ = binding.is_valid()
        _ = binding.errors()
        assert calls == [1]
        binding.value = 2
        assert calls == [1, 2]

    def test_multiple_validators_are_combined(self):
        binding = Validating(0, is_greater_than(3), is_less_than(10), is_even)
        assert binding.errors() == ("must be greater than 3",)
        binding.value = 11
        assert binding.errors() == ("must be less than 10", "must be even")
        binding.value = 8
        assert binding.is_valid()

    def test_without_validators_everything_is_valid(self):
        assert Validating("anything").is_valid()

    def test_revalidation_is_logged(self, caplog):
        binding = Validating(0, is_even)
        with caplog.at_level(logging.DEBUG, logger="fvframework.validating"):
            binding.value = 1
        assert "Revalidated 1" in caplog.text


class TestOptionalValidating:
    @pytest.mark.parametrize(
        "value, required, expected",
        [
            pytest.param(4, True, Valid(4), id="required with value"),
            pytest.param(None, True, Invalid("is required"), id="required without value"),
            pytest.param(None, False, Valid(None), id="optional without value"),
            pytest.param(3, False, Invalid("must be greater than 3"), id="optional with invalid value"),
            pytest.param(3, True, Invalid("must be greater than 3"), id="required with invalid value"),
        ],
    )
    def test_initial_validation(self, value: Optional[int], required: bool, expected):
        binding = OptionalValidating(value, is_greater_than(3), required=required)
        assert binding.result == expected
        assert binding.required is required

    def test_required_is_the_default(self):
        binding = OptionalValidating(4, is_greater_than(3))
        assert binding.required
        binding.value = None
        assert binding.errors() == ("is required",)

    def test_custom_required_error(self):
        binding = OptionalValidating(None, is_greater_than(3), required_error="please enter a number")
        assert binding.errors() == ("please enter a number",)

    def test_revalidates_when_value_changes(self):
        binding = OptionalValidating(None, is_greater_than(3), required=False)
        assert binding.is_valid()
        binding.value = 3
        assert binding.errors() == ("must be greater than 3",)
        binding.value = 4
        assert binding.is_valid()
        binding.value = None
        assert binding.is_valid()

    def test_required_error_without_required_is_rejected(self):
        with pytest.raises(ValueError):
            OptionalValidating(None, is_greater_than(3), required=False, required_error="please enter a number")

    def test_policy_cannot_be_changed(self):
        binding = OptionalValidating(None, is_greater_than(3), required=False)
        with pytest.raises(AttributeError):
            binding.required = True  # type: ignore[misc]


class TestValidatingContainer:
    """
    Bindings are constructed explicitly inside the owning class.
    """

    class ValidatingContainer:
        def __init__(self):
            self.int_value = Validating(0, is_greater_than(3), is_less_than(10))
            self.string_value = Validating("", its_length(is_at_least(5)))
            # the first element has to be 1
            self.numbers: Validating[list[int], str] = Validating(
                [], its(lambda numbers: numbers[:1], is_equal_to([1]))
            )

        def is_valid(self) -> bool:
            return zip_validated(self.int_value.result, self.string_value.result, self.numbers.result).is_valid

    def test_container(self):
        container = self.ValidatingContainer()
        assert not container.is_valid()

        container.int_value.value = 2
        container.numbers.value = [2, 3]
        assert not container.is_valid()

        container.string_value.value = "foo"
        assert not container.is_valid()
        assert container.string_value.errors() == ("length must be at least 5",)

        container.string_value.value = "foobar"
        container.int_value.value = 11
        container.numbers.value = [1, 2, 3]
        assert not container.is_valid()

        container.int_value.value = 9
        assert container.is_valid()
