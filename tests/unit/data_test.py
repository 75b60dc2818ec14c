import dataclasses

import pytest

from config.constants import ERROR_MESSAGES
from data.checkout_data import (CHECKOUT_TEST_DATA, INVALID_CHECKOUT_INFO, VALID_CHECKOUT_INFO,
                                get_checkout_info_with_missing_field, get_random_checkout_info)
from data.models import OrderSummary, SortOption
from data.products import (ALL_PRODUCTS, PRICES_HIGH_TO_LOW, PRICES_LOW_TO_HIGH, PRODUCT_NAMES_AZ, PRODUCT_NAMES_ZA,
                           TOTAL_PRODUCTS_COUNT, get_cheapest_product, get_most_expensive_product,
                           get_product_by_name, get_random_products)
from data.users import DEFAULT_USER, INVALID_USERS, VALID_USERS, get_invalid_user
from utils.exceptions import ProductNotFoundError


@pytest.mark.unit
class TestProducts:

    def test_catalogue(self):
        assert TOTAL_PRODUCTS_COUNT == 6
        assert len({p.name for p in ALL_PRODUCTS}) == 6

    def test_reference_orderings_match_catalogue(self):
        names = [p.name for p in ALL_PRODUCTS]
        prices = [p.price for p in ALL_PRODUCTS]
        assert list(PRODUCT_NAMES_AZ) == sorted(names)
        assert list(PRODUCT_NAMES_ZA) == sorted(names, reverse=True)
        assert list(PRICES_LOW_TO_HIGH) == sorted(prices)
        assert list(PRICES_HIGH_TO_LOW) == sorted(prices, reverse=True)

    def test_lookup(self):
        assert get_product_by_name("Sauce Labs Onesie").price == 7.99
        assert get_product_by_name("Sauce Labs Umbrella") is None
        assert get_cheapest_product().name == "Sauce Labs Onesie"
        assert get_most_expensive_product().name == "Sauce Labs Fleece Jacket"

    def test_random_products_distinct(self):
        products = get_random_products(10)
        assert len(products) == TOTAL_PRODUCTS_COUNT
        assert len(set(products)) == TOTAL_PRODUCTS_COUNT

    def test_records_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ALL_PRODUCTS[0].price = 0


@pytest.mark.unit
class TestUsers:

    def test_invalid_users_have_expected_error(self):
        assert get_invalid_user("locked").error_msg == ERROR_MESSAGES["locked_out"]
        assert INVALID_USERS["empty_username"].error_msg == "Epic sadface: Username is required"
        assert INVALID_USERS["empty_both"].error_msg == ERROR_MESSAGES["username_required"]
        assert INVALID_USERS["empty_password"].error_msg == ERROR_MESSAGES["password_required"]
        assert all(u.error_msg for u in INVALID_USERS.values())

    def test_valid_users(self):
        assert set(VALID_USERS) == {"standard", "performance", "problem", "visual"}
        assert all(not u.error_msg for u in VALID_USERS.values())
        assert DEFAULT_USER is VALID_USERS["standard"]


@pytest.mark.unit
class TestCheckoutData:

    def test_valid_info(self):
        assert (VALID_CHECKOUT_INFO.first_name, VALID_CHECKOUT_INFO.last_name,
                VALID_CHECKOUT_INFO.postal_code) == ("John", "Doe", "12345")
        assert get_random_checkout_info() in CHECKOUT_TEST_DATA

    @pytest.mark.parametrize("field, expected", [
        ("first_name", ERROR_MESSAGES["first_name_required"]),
        ("last_name", ERROR_MESSAGES["last_name_required"]),
        ("postal_code", ERROR_MESSAGES["postal_code_required"]),
    ])
    def test_missing_field(self, field, expected):
        info = get_checkout_info_with_missing_field(field)
        assert getattr(info, field) == ""
        assert INVALID_CHECKOUT_INFO[f"missing_{field}"] == (info, expected)

    def test_unknown_field_gives_empty_form(self):
        info = get_checkout_info_with_missing_field("phone")
        assert (info.first_name, info.last_name, info.postal_code) == ("", "", "")


@pytest.mark.unit
class TestModels:

    def test_order_summary_tolerance(self):
        assert OrderSummary(39.98, 3.20, 43.18).is_consistent()
        assert OrderSummary(39.98, 3.20, 43.185).is_consistent()
        assert not OrderSummary(39.98, 3.20, 43.20).is_consistent()

    def test_sort_option_values(self):
        assert [o.value for o in SortOption] == ["az", "za", "lohi", "hilo"]

    def test_product_not_found_message(self):
        assert "Sauce Labs Umbrella" in str(ProductNotFoundError("Sauce Labs Umbrella"))
        assert "7" in str(ProductNotFoundError(7, where="cart"))
