import allure
from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_STEP_ONE_LOCATORS
from config.pages import PAGE_PATHS, URLS
from data.models import CheckoutInfo
from pages.base_page import BasePage


class CheckoutStepOnePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        #  收货人信息
        self.page_title = page.locator(CHECKOUT_STEP_ONE_LOCATORS["page_title"])
        self.firstName_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["postalCode_input"])  # postalCode输入框
        self.continue_button = page.locator(CHECKOUT_STEP_ONE_LOCATORS["continue_button"])  # 继续按钮
        self.cancel_button = page.locator(CHECKOUT_STEP_ONE_LOCATORS["cancel_button"])  # 取消按钮
        self.error_message = page.locator(CHECKOUT_STEP_ONE_LOCATORS["error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.error_close_button = page.locator(CHECKOUT_STEP_ONE_LOCATORS["error_close_button"])

    # ========== 页面行为 ==========
    def navigate_to_checkout_step_one(self):
        self.goto(URLS["checkout_step_one"])
        self.wait_for_page_load()

    def enter_first_name(self, first_name: str):
        self.fill(self.firstName_input, first_name)

    def enter_last_name(self, last_name: str):
        self.fill(self.lastName_input, last_name)

    def enter_postal_code(self, postal_code: str):
        self.fill(self.postalCode_input, postal_code)

    def fill_checkout_form(self, first_name: str, last_name: str, postal_code: str):
        self.enter_first_name(first_name)
        self.enter_last_name(last_name)
        self.enter_postal_code(postal_code)

    def fill_checkout_information(self, info: CheckoutInfo):
        self.fill_checkout_form(info.first_name, info.last_name, info.postal_code)

    def click_continue(self):
        """点击Checkout-step-one页面continue按钮"""
        self.click(self.continue_button)

    def click_cancel(self):
        """点击Checkout-step-one页面cancel按钮，回到购物车"""
        self.click(self.cancel_button)

    def complete_step_one(self, info: CheckoutInfo):
        with allure.step(f"填写收货人信息：{info.first_name} {info.last_name} {info.postal_code}"):
            self.fill_checkout_information(info)
            self.click_continue()

    def close_error_message(self):
        if self.is_element_visible(self.error_close_button):
            self.click(self.error_close_button)

    def clear_first_name(self):
        self.clear_input(self.firstName_input)

    def clear_last_name(self):
        self.clear_input(self.lastName_input)

    def clear_postal_code(self):
        self.clear_input(self.postalCode_input)

    def clear_checkout_form(self):
        self.clear_first_name()
        self.clear_last_name()
        self.clear_postal_code()

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        return self.get_text(self.page_title)

    def get_error_message(self) -> str:
        if self.is_element_visible(self.error_message):
            return self.get_text(self.error_message)
        return ""

    def get_first_name(self) -> str:
        return self.get_input_value(self.firstName_input)

    def get_last_name(self) -> str:
        return self.get_input_value(self.lastName_input)

    def get_postal_code(self) -> str:
        return self.get_input_value(self.postalCode_input)

    def is_error_message_visible(self) -> bool:
        return self.is_element_visible(self.error_message)

    def is_continue_button_enabled(self) -> bool:
        return self.is_element_enabled(self.continue_button)

    def is_cancel_button_visible(self) -> bool:
        return self.is_element_visible(self.cancel_button)

    # ========== checkout-step-one 基本验证 ==========
    def verify_on_checkout_step_one(self):
        self.expect_url_to_contain(PAGE_PATHS["checkout_step_one"])
        self.expect_element_to_be_visible(self.firstName_input)
        self.expect_element_to_be_visible(self.continue_button)

    def verify_container_empty(self, expect_error_msg: str):
        """收货人信息缺失：出现对应错误提示，且停留在 step one"""
        self.expect_element_to_be_visible(self.error_message)
        CheckOutAssert.error_message(self.get_error_message(), expect_error_msg)
        self.verify_on_checkout_step_one()
