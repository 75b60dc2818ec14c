import logging

import allure
from playwright.sync_api import Locator, Page

from config.locators import CART_LOCATORS
from config.pages import PAGE_PATHS, URLS
from config.settings import SETTINGS
from data.models import CartItem
from pages.base_page import BasePage
from utils.common_utils import parse_price
from utils.exceptions import CartNotEmptiedError, ProductNotFoundError

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.page_title = page.locator(CART_LOCATORS["page_title"])
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_item_name = page.locator(CART_LOCATORS["cart_item_name"])
        self.cart_item_price = page.locator(CART_LOCATORS["cart_item_price"])
        self.cart_item_desc = page.locator(CART_LOCATORS["cart_item_desc"])
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮
        self.shopping_cart_badge = page.locator(CART_LOCATORS["shopping_cart_badge"])

    # ================= 页面行为 =================
    def navigate_to_cart_page(self):
        self.goto(URLS["cart"])
        self.wait_for_page_load()

    def find_item_row(self, product_name: str) -> Locator:
        for row in self.cart_items.all():
            if self.get_text(row.locator(CART_LOCATORS["cart_item_name"])) == product_name:
                return row
        raise ProductNotFoundError(product_name, where="cart")

    def remove_item_by_name(self, product_name: str):
        with allure.step(f"购物车移除商品：{product_name}"):
            row = self.find_item_row(product_name)
            self.click(row.locator(CART_LOCATORS["remove_product_button"]))
            logger.info("removed %r from cart page", product_name)

    def remove_item_by_index(self, index: int):
        rows = self.cart_items.all()
        if not 0 <= index < len(rows):
            raise ProductNotFoundError(index, where="cart")
        self.click(rows[index].locator(CART_LOCATORS["remove_product_button"]))

    def remove_all_items(self, settle_ms: int | None = None):
        """
        反复删除第一行直到购物车为空
        - 默认每次删除后 expect 行数减一（最多 ACTION_TIMEOUT），行数不减少抛 CartNotEmptiedError
        - 传入 settle_ms 则每次删除后固定等待
        """
        with allure.step("清空购物车"):
            count = self.get_cart_item_count()
            while count > 0:
                self.remove_item_by_index(0)
                if settle_ms is not None:
                    self.wait_for_timeout(settle_ms)
                else:
                    try:
                        self.expect_element_count_to_be(self.cart_items, count - 1, timeout=SETTINGS.action_timeout)
                    except AssertionError as e:
                        raise CartNotEmptiedError(f"删除第一行后购物车仍有 {count} 件商品") from e
                count = self.get_cart_item_count()

    def continue_shopping(self):
        self.click(self.continue_shopping_button)

    def proceed_to_checkout(self):
        self.click(self.checkout_button)

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        return self.get_text(self.page_title)

    def get_cart_item_count(self) -> int:
        return self.get_element_count(self.cart_items)

    def get_cart_badge_count(self) -> int:
        if self.is_element_visible(self.shopping_cart_badge):
            return int(self.get_text(self.shopping_cart_badge))
        return 0

    def get_cart_item_names(self) -> list[str]:
        return self.get_all_text(self.cart_item_name)

    def get_cart_item_prices(self) -> list[str]:
        return self.get_all_text(self.cart_item_price)

    def get_cart_item_descriptions(self) -> list[str]:
        return self.get_all_text(self.cart_item_desc)

    def get_cart_items(self) -> list[CartItem]:
        """保存购物车页面商品信息list"""
        items = []
        for row in self.cart_items.all():
            items.append(CartItem(
                name=self.get_text(row.locator(CART_LOCATORS["cart_item_name"])),
                price=parse_price(self.get_text(row.locator(CART_LOCATORS["cart_item_price"]))),
                quantity=int(self.get_text(row.locator(CART_LOCATORS["cart_quantity"])) or 0)))
        return items

    def get_item_quantity(self, product_name: str) -> int:
        """商品不在购物车返回 0"""
        try:
            row = self.find_item_row(product_name)
        except ProductNotFoundError:
            return 0
        return int(self.get_text(row.locator(CART_LOCATORS["cart_quantity"])) or 0)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_product_in_cart(self, product_name: str) -> bool:
        return product_name in self.get_cart_item_names()

    def is_continue_shopping_button_visible(self) -> bool:
        return self.is_element_visible(self.continue_shopping_button)

    def is_checkout_button_visible(self) -> bool:
        return self.is_element_visible(self.checkout_button)

    def is_checkout_button_enabled(self) -> bool:
        return self.is_element_enabled(self.checkout_button)

    # ================= 基础验证 =================
    def verify_on_cart_page(self):
        self.expect_url_to_contain(PAGE_PATHS["cart"])
        self.expect_element_to_be_visible(self.checkout_button)
        self.expect_element_to_be_visible(self.continue_shopping_button)
