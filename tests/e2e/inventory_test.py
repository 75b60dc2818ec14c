import allure
import pytest

from assertions.inventory_assert import InventoryAssert
from config.constants import PAGE_TITLES
from data.models import SortOption
from data.products import (PRICES_HIGH_TO_LOW, PRICES_LOW_TO_HIGH, PRODUCT_NAMES_AZ, PRODUCT_NAMES_ZA,
                           PRODUCTS, TOTAL_PRODUCTS_COUNT)
from pages.cart_page import CartPage
from pages.inventory_page import InventoryPage
from pages.product_detail_page import ProductDetailPage


@pytest.fixture(scope="function")
def inventory_page(page):
    inventory_page = InventoryPage(page)
    inventory_page.open_inventory()
    return inventory_page


@allure.feature("商品列表")
@pytest.mark.ui
@pytest.mark.need_login
class TestInventory:

    def test_inventory_base_info(self, inventory_page):
        """验证商品数量及每个商品的名称、描述、图片、价格格式"""
        inventory_page.verify_on_inventory_page()
        inventory_page.verify_base_info(TOTAL_PRODUCTS_COUNT)
        inventory_page.expect_element_to_have_text(inventory_page.page_title, PAGE_TITLES["inventory"])
        assert inventory_page.get_page_title() == PAGE_TITLES["inventory"]

    @allure.story("排序")
    def test_sort_by_name_a_to_z(self, inventory_page):
        inventory_page.sort_products_by(SortOption.NAME_ASC)
        InventoryAssert.names_in_order(inventory_page.get_product_names(), PRODUCT_NAMES_AZ)

    @allure.story("排序")
    def test_sort_by_name_z_to_a(self, inventory_page):
        inventory_page.sort_products_by(SortOption.NAME_DESC)
        InventoryAssert.names_in_order(inventory_page.get_product_names(), PRODUCT_NAMES_ZA)
        assert inventory_page.get_current_sort_option() == SortOption.NAME_DESC.value

    @allure.story("排序")
    def test_sort_by_price_low_to_high(self, inventory_page):
        inventory_page.sort_products_by(SortOption.PRICE_ASC)
        prices = inventory_page.get_product_prices_as_number()
        InventoryAssert.sort_asc(prices)
        assert tuple(prices) == PRICES_LOW_TO_HIGH

    @allure.story("排序")
    def test_sort_by_price_high_to_low(self, inventory_page):
        inventory_page.sort_products_by(SortOption.PRICE_DESC)
        prices = inventory_page.get_product_prices_as_number()
        InventoryAssert.sort_desc(prices)
        assert tuple(prices) == PRICES_HIGH_TO_LOW

    @allure.story("商品详情")
    def test_product_detail_and_back(self, inventory_page, page):
        """点击商品名称进入详情页，信息一致，返回列表"""
        backpack = PRODUCTS["backpack"]
        inventory_page.click_product_by_name(backpack.name)

        detail_page = ProductDetailPage(page)
        detail_page.verify_on_product_detail_page()
        detail_page.verify_product_details(backpack.name, f"${backpack.price}", backpack.description)

        detail_page.go_back_to_products()
        inventory_page.verify_on_inventory_page()

    @allure.story("商品详情")
    def test_product_detail_add_and_remove(self, inventory_page, page):
        """点击商品图片进入详情页，在详情页加购、移除"""
        jacket = PRODUCTS["fleece_jacket"]
        inventory_page.click_product_image_by_name(jacket.name)

        detail_page = ProductDetailPage(page)
        detail_page.verify_on_product_detail_page()
        detail_page.verify_product_details_displayed()
        assert detail_page.get_product_name() == jacket.name
        assert detail_page.get_product_description() == jacket.description
        assert detail_page.get_product_price_as_number() == jacket.price
        assert detail_page.is_product_image_visible()
        assert detail_page.is_back_button_visible()

        detail_page.add_to_cart()
        detail_page.expect_element_to_be_visible(detail_page.remove_product_button)
        assert detail_page.get_cart_item_count() == 1

        detail_page.remove_from_cart()
        detail_page.expect_element_to_be_visible(detail_page.add_product_button)
        assert detail_page.is_add_to_cart_button_visible()
        assert not detail_page.is_remove_button_visible()
        assert detail_page.get_cart_item_count() == 0

    @allure.story("加购")
    def test_add_product_to_cart(self, inventory_page):
        inventory_page.add_product_to_cart_by_name(PRODUCTS["backpack"].name)
        assert inventory_page.get_cart_item_count() == 1
        assert inventory_page.is_cart_badge_visible()

    @allure.story("加购")
    def test_add_multiple_products(self, inventory_page):
        names = [PRODUCTS[key].name for key in ("backpack", "bike_light", "bolt_t_shirt")]
        for name in names:
            inventory_page.add_product_to_cart_by_name(name)
        assert inventory_page.get_cart_item_count() == len(names)

    @allure.story("加购")
    def test_remove_product_on_inventory(self, inventory_page):
        """列表页加购后再移除，角标消失"""
        name = PRODUCTS["bike_light"].name
        inventory_page.add_product_to_cart_by_name(name)
        assert inventory_page.get_cart_item_count() == 1

        inventory_page.remove_product_from_cart_by_name(name)
        assert inventory_page.get_cart_item_count() == 0
        assert not inventory_page.is_cart_badge_visible()

    def test_navigate_to_cart(self, inventory_page, page):
        inventory_page.click_cart_icon()
        CartPage(page).verify_on_cart_page()

    def test_specific_product_displayed(self, inventory_page):
        assert inventory_page.is_product_displayed(PRODUCTS["fleece_jacket"].name)
        assert not inventory_page.is_product_displayed("Sauce Labs Umbrella")
