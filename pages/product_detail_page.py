from playwright.sync_api import Page

from config.locators import PRODUCT_DETAIL_LOCATORS
from config.pages import PAGE_PATHS
from pages.base_page import BasePage
from utils.common_utils import parse_price


class ProductDetailPage(BasePage):
    """单商品详情页：只作用于当前展示的这一个商品"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.product_name = page.locator(PRODUCT_DETAIL_LOCATORS["product_name"])
        self.product_desc = page.locator(PRODUCT_DETAIL_LOCATORS["product_desc"])
        self.product_price = page.locator(PRODUCT_DETAIL_LOCATORS["product_price"])
        self.product_img = page.locator(PRODUCT_DETAIL_LOCATORS["product_img"])
        self.add_product_button = page.locator(PRODUCT_DETAIL_LOCATORS["add_product_button"])
        self.remove_product_button = page.locator(PRODUCT_DETAIL_LOCATORS["remove_product_button"])
        self.back_button = page.locator(PRODUCT_DETAIL_LOCATORS["back_button"])
        self.shopping_cart_badge = page.locator(PRODUCT_DETAIL_LOCATORS["shopping_cart_badge"])

    # ================= 页面行为 =================
    def add_to_cart(self):
        self.click(self.add_product_button)

    def remove_from_cart(self):
        self.click(self.remove_product_button)

    def go_back_to_products(self):
        self.click(self.back_button)

    # ================= 数据获取 =================
    def get_product_name(self) -> str:
        return self.get_text(self.product_name)

    def get_product_description(self) -> str:
        return self.get_text(self.product_desc)

    def get_product_price(self) -> str:
        return self.get_text(self.product_price)

    def get_product_price_as_number(self) -> float:
        return parse_price(self.get_product_price())

    def get_cart_item_count(self) -> int:
        if self.is_element_visible(self.shopping_cart_badge):
            return int(self.get_text(self.shopping_cart_badge))
        return 0

    def is_add_to_cart_button_visible(self) -> bool:
        return self.is_element_visible(self.add_product_button)

    def is_remove_button_visible(self) -> bool:
        return self.is_element_visible(self.remove_product_button)

    def is_product_image_visible(self) -> bool:
        return self.is_element_visible(self.product_img)

    def is_back_button_visible(self) -> bool:
        return self.is_element_visible(self.back_button)

    # ========== 基础校验 ==========
    def verify_on_product_detail_page(self):
        self.expect_url_to_contain(PAGE_PATHS["product_detail"])
        self.expect_element_to_be_visible(self.back_button)

    def verify_product_details_displayed(self):
        self.expect_element_to_be_visible(self.product_name)
        self.expect_element_to_be_visible(self.product_desc)
        self.expect_element_to_be_visible(self.product_price)
        self.expect_element_to_be_visible(self.product_img)

    def verify_product_details(self, expected_name: str, expected_price: str, expected_description: str = None):
        self.expect_element_to_contain_text(self.product_name, expected_name)
        self.expect_element_to_contain_text(self.product_price, expected_price)
        if expected_description:
            self.expect_element_to_contain_text(self.product_desc, expected_description)
