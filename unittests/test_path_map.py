from dataclasses import dataclass
from typing import Optional

import pytest
from frozendict import frozendict
from typeguard import TypeCheckError

from fvframework import Invalid, PathMappedValidator, Valid
from fvframework.builtin import has_exact_length, is_at_least, is_not_empty
from fvframework.utils import optional_field, required_field


@dataclass(frozen=True)
class Address:
    street: str
    zip_code: str


@dataclass(frozen=True)
class Customer:
    name: str
    age: int
    address: Address
    contracts: frozendict[str, str]
    nickname: Optional[str] = None


CUSTOMER = Customer(
    name="John Doe",
    age=42,
    address=Address(street="Main Street 1", zip_code="12345"),
    contracts=frozendict({"c1": "electricity"}),
)


class TestQueryObject:
    def test_required_field(self):
        assert required_field(CUSTOMER, "address.zip_code", str) == "12345"
        assert required_field(CUSTOMER, "contracts.c1", str) == "electricity"

    def test_required_field_missing(self):
        with pytest.raises(AttributeError, match="address.country: Not found"):
            required_field(CUSTOMER, "address.country.code", str)
        with pytest.raises(AttributeError, match="contracts.c2: Not found"):
            required_field(CUSTOMER, "contracts.c2", str)

    def test_required_field_wrong_type(self):
        with pytest.raises(TypeCheckError, match="^age: "):
            required_field(CUSTOMER, "age", str)

    def test_optional_field(self):
        assert optional_field(CUSTOMER, "age", int) == 42
        assert optional_field(CUSTOMER, "age", str) is None
        assert optional_field(CUSTOMER, "address.country", str) is None


class TestPathMappedValidator:
    def test_valid_object(self):
        validator = PathMappedValidator({"name": is_not_empty, "address.zip_code": has_exact_length(5)})
        assert validator.validate(CUSTOMER) == Valid(CUSTOMER)

    def test_errors_are_collected_in_path_order(self):
        validator = PathMappedValidator(
            {"age": is_at_least(50), "address.zip_code": has_exact_length(4), "name": is_not_empty}
        )
        assert validator.validate(CUSTOMER) == Invalid("must be at least 50", "length must be exactly 4")

    def test_label_errors(self):
        validator = PathMappedValidator(
            {"age": is_at_least(50), "nickname": is_not_empty.optional("is required")},
            label_errors=lambda path, error: f"{path}: {error}",
        )
        assert validator.validate(CUSTOMER).errors == ("age: must be at least 50", "nickname: is required")

    def test_path_types_are_checked(self):
        validator = PathMappedValidator({"age": is_at_least(18)}, path_types={"age": int})
        assert validator.validate(CUSTOMER).is_valid
        wrongly_typed = PathMappedValidator({"age": is_at_least(18)}, path_types={"age": str})
        with pytest.raises(TypeCheckError):
            wrongly_typed.validate(CUSTOMER)

    def test_missing_path_is_invalid(self):
        validator = PathMappedValidator({"address.country": is_not_empty, "name": is_not_empty})
        assert validator.validate(CUSTOMER) == Invalid("is required")

    def test_missing_key_of_dict_is_invalid(self):
        validator = PathMappedValidator({"name": is_not_empty}, label_errors=lambda path, error: f"{path}: {error}")
        assert validator.validate({}) == Invalid("name: is required")
        assert validator.validate({"name": "John"}) == Valid({"name": "John"})

    def test_custom_missing_error(self):
        validator = PathMappedValidator(
            {"contracts.c2": is_not_empty, "age": is_at_least(50)}, missing_error="value not provided"
        )
        assert validator.validate(CUSTOMER) == Invalid("value not provided", "must be at least 50")

    def test_invalid_path_maps(self):
        with pytest.raises(ValueError):
            PathMappedValidator({})
        with pytest.raises(ValueError):
            PathMappedValidator({"age": is_at_least(18)}, path_types={"name": str})

    def test_path_map_is_immutable(self):
        validator = PathMappedValidator({"age": is_at_least(18)})
        assert isinstance(validator.path_map, frozendict)
        assert str(validator) == "PathMappedValidator(['age'])"

    def test_can_be_composed_like_any_validator(self):
        validator = PathMappedValidator({"age": is_at_least(50)}).pullback(lambda customers: customers[0])
        assert validator.validate([CUSTOMER]) == Invalid("must be at least 50")
