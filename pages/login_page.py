import logging

import allure
from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.pages import URLS
from pages.base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.error_close_button = page.locator(LOGIN_LOCATORS["error_close_button"])  # 错误提示关闭按钮
        self.login_logo = page.locator(LOGIN_LOCATORS["login_logo"])

    # ================= 页面行为 =================
    def navigate_to_login_page(self):
        self.goto(URLS["login"])
        self.wait_for_page_load()

    def enter_username(self, username: str):
        self.fill(self.username_input, username)

    def enter_password(self, password: str):
        self.fill(self.password_input, password)

    def click_login_button(self):
        self.click(self.login_button)

    def login(self, username: str, password: str):
        with allure.step(f"登录：{username or '<空用户名>'}"):
            logger.info("login as %r", username)
            self.enter_username(username)
            self.enter_password(password)
            self.click_login_button()

    def close_error_message(self):
        """错误提示存在时才点关闭"""
        if self.is_element_visible(self.error_close_button):
            self.click(self.error_close_button)

    def clear_username(self):
        self.clear_input(self.username_input)

    def clear_password(self):
        self.clear_input(self.password_input)

    def clear_login_form(self):
        self.clear_username()
        self.clear_password()

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        """没有错误提示时返回空字符串"""
        if self.is_element_visible(self.error_message):
            return self.get_text(self.error_message)
        return ""

    def get_username_placeholder(self) -> str | None:
        return self.get_attribute(self.username_input, "placeholder")

    def get_password_placeholder(self) -> str | None:
        return self.get_attribute(self.password_input, "placeholder")

    def is_error_message_visible(self) -> bool:
        return self.is_element_visible(self.error_message)

    def is_login_logo_visible(self) -> bool:
        return self.is_element_visible(self.login_logo)

    def is_login_button_enabled(self) -> bool:
        return self.is_element_enabled(self.login_button)

    # ========== 登录校验 ==========
    def verify_on_login_page(self):
        self.expect_url_to_be(URLS["login"])
        self.expect_element_to_be_visible(self.login_logo)
        self.expect_element_to_be_visible(self.login_button)

    def verify_login_fail(self, expect_msg: str):
        """停留在登录页，且错误提示与预期完全一致"""
        self.expect_element_to_be_visible(self.error_message)
        LoginAssert.error_message(self.get_error_message(), expect_msg)
        self.verify_on_login_page()
