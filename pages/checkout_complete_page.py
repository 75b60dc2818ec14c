import allure
from playwright.sync_api import Page

from config.locators import CHECKOUT_COMPLETE_LOCATORS
from config.pages import PAGE_PATHS, URLS
from pages.base_page import BasePage


class CheckoutCompletePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.page_title = page.locator(CHECKOUT_COMPLETE_LOCATORS["page_title"])
        self.complete_header = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_header"])  # Thank you for your order!
        self.complete_text = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_text"])
        self.back_home_button = page.locator(CHECKOUT_COMPLETE_LOCATORS["back_home_button"])
        self.pony_express_img = page.locator(CHECKOUT_COMPLETE_LOCATORS["pony_express_img"])

    # ========== 页面行为 ==========
    def navigate_to_checkout_complete(self):
        self.goto(URLS["checkout_complete"])
        self.wait_for_page_load()

    def go_back_home(self):
        self.click(self.back_home_button)

    def click_back_to_products(self):
        self.go_back_home()

    def complete_post_order_flow(self):
        """确认下单完成后返回首页"""
        with allure.step("下单完成，返回首页"):
            self.verify_order_completion()
            self.go_back_home()

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        return self.get_text(self.page_title)

    def get_complete_header(self) -> str:
        return self.get_text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.get_text(self.complete_text)

    def is_order_complete(self) -> bool:
        return self.is_element_visible(self.complete_header)

    def is_pony_express_image_visible(self) -> bool:
        return self.is_element_visible(self.pony_express_img)

    def is_back_home_button_visible(self) -> bool:
        return self.is_element_visible(self.back_home_button)

    # ========== 提交订单页面 ==========
    def verify_order_completion(self, expected_header: str = None, expected_text: str = None):
        self.expect_element_to_be_visible(self.complete_header)
        self.expect_element_to_be_visible(self.complete_text)
        if expected_header:
            self.expect_element_to_contain_text(self.complete_header, expected_header)
        if expected_text:
            self.expect_element_to_contain_text(self.complete_text, expected_text)

    def verify_on_checkout_complete(self):
        self.expect_url_to_contain(PAGE_PATHS["checkout_complete"])
        self.expect_element_to_be_visible(self.complete_header)
        self.expect_element_to_be_visible(self.back_home_button)
