import logging
import re
from pathlib import Path
from typing import Any

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from config.settings import SETTINGS
from utils.common_utils import get_timestamp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = SETTINGS.default_timeout


class BasePage:
    """
    所有页面对象的基类：只封装 Playwright 的定位/操作/等待/断言，不持有任何选择器
    - 元素参数既可以是 selector 字符串，也可以是已经构造好的 Locator（如商品行内的按钮）
    - 操作、等待、断言失败直接抛出异常让用例失败
    - is_element_* 系列吞掉引擎异常返回 False
    """
    SCREENSHOT_DIR = Path("screenshots")

    def __init__(self, page: Page):
        self.page = page

    def locator(self, target: str | Locator) -> Locator:
        if isinstance(target, str):
            return self.page.locator(target)
        return target

    # ========= 导航 =========
    def goto(self, url: str):
        logger.debug("goto %s", url)
        self.page.goto(url, wait_until="domcontentloaded")

    def open(self, url: str):
        self.goto(url)

    def reload(self):
        self.page.reload(wait_until="domcontentloaded")

    def go_back(self):
        self.page.go_back(wait_until="domcontentloaded")

    def go_forward(self):
        self.page.go_forward(wait_until="domcontentloaded")

    def get_current_url(self) -> str:
        return self.page.url

    def get_page_title(self) -> str:
        return self.page.title()

    # ========= 基础动作 =========
    def click(self, target: str | Locator):
        self.locator(target).click()

    def fill(self, target: str | Locator, value: str):
        self.locator(target).fill(value)

    def select_dropdown(self, target: str | Locator, value: str):
        self.locator(target).select_option(value)

    def clear_input(self, target: str | Locator):
        self.locator(target).clear()

    def hover(self, target: str | Locator):
        self.locator(target).hover()

    def double_click(self, target: str | Locator):
        self.locator(target).dblclick()

    def right_click(self, target: str | Locator):
        self.locator(target).click(button="right")

    def focus(self, target: str | Locator):
        self.locator(target).focus()

    def press_key(self, key: str):
        self.page.keyboard.press(key)

    def type_text(self, target: str | Locator, text: str, delay: float = 0):
        """逐字符输入，delay 为按键间隔毫秒"""
        self.locator(target).press_sequentially(text, delay=delay)

    # ========= 读取 =========
    def get_text(self, target: str | Locator) -> str:
        text = self.locator(target).text_content()
        return text.strip() if text else ""

    def get_all_text(self, target: str | Locator) -> list[str]:
        return [(t or "").strip() for t in self.locator(target).all_text_contents()]

    def get_attribute(self, target: str | Locator, name: str) -> str | None:
        return self.locator(target).get_attribute(name)

    def get_input_value(self, target: str | Locator) -> str:
        return self.locator(target).input_value()

    def get_element_count(self, target: str | Locator) -> int:
        return self.locator(target).count()

    # ========= 等待 =========
    def wait_for_element(self, target: str | Locator, timeout: float = DEFAULT_TIMEOUT):
        self.locator(target).wait_for(state="attached", timeout=timeout)

    def wait_for_element_to_be_visible(self, target: str | Locator, timeout: float = DEFAULT_TIMEOUT):
        self.locator(target).wait_for(state="visible", timeout=timeout)

    def wait_for_element_to_be_hidden(self, target: str | Locator, timeout: float = DEFAULT_TIMEOUT):
        self.locator(target).wait_for(state="hidden", timeout=timeout)

    def wait_for_navigation(self):
        self.page.wait_for_load_state("domcontentloaded")

    def wait_for_page_load(self):
        self.page.wait_for_load_state("load")

    def wait_for_network_idle(self):
        self.page.wait_for_load_state("networkidle")

    def wait_for_timeout(self, ms: float):
        # 固定等待，尽量少用
        self.page.wait_for_timeout(ms)

    # ========= 状态判断（不抛异常） =========
    def is_element_visible(self, target: str | Locator) -> bool:
        try:
            return self.locator(target).is_visible()
        except PlaywrightError as e:
            logger.debug("is_element_visible(%s) -> False: %s", target, e)
            return False

    def is_element_enabled(self, target: str | Locator) -> bool:
        try:
            return self.locator(target).is_enabled()
        except PlaywrightError as e:
            logger.debug("is_element_enabled(%s) -> False: %s", target, e)
            return False

    def is_element_disabled(self, target: str | Locator) -> bool:
        try:
            return self.locator(target).is_disabled()
        except PlaywrightError as e:
            logger.debug("is_element_disabled(%s) -> False: %s", target, e)
            return False

    def is_element_checked(self, target: str | Locator) -> bool:
        try:
            return self.locator(target).is_checked()
        except PlaywrightError as e:
            logger.debug("is_element_checked(%s) -> False: %s", target, e)
            return False

    def is_element_present(self, target: str | Locator) -> bool:
        try:
            return self.locator(target).count() > 0
        except PlaywrightError as e:
            logger.debug("is_element_present(%s) -> False: %s", target, e)
            return False

    # ========= 断言（Playwright expect 自带轮询） =========
    def expect_element_to_be_visible(self, target: str | Locator):
        expect(self.locator(target)).to_be_visible()  # 严格模式：locator 定位到多个元素时会报错，需要 .first

    def expect_element_to_be_hidden(self, target: str | Locator):
        expect(self.locator(target)).to_be_hidden()

    def expect_element_to_contain_text(self, target: str | Locator, text: str):
        expect(self.locator(target)).to_contain_text(text)

    def expect_element_to_have_text(self, target: str | Locator, text: str):
        expect(self.locator(target)).to_have_text(text)

    def expect_url_to_be(self, url: str):
        expect(self.page).to_have_url(url)

    def expect_url_to_contain(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))

    def expect_title_to_contain(self, pattern: str):
        expect(self.page).to_have_title(re.compile(pattern))

    def expect_element_to_be_enabled(self, target: str | Locator):
        expect(self.locator(target)).to_be_enabled()

    def expect_element_to_be_disabled(self, target: str | Locator):
        expect(self.locator(target)).to_be_disabled()

    def expect_element_count_to_be(self, target: str | Locator, count: int, timeout: float | None = None):
        expect(self.locator(target)).to_have_count(count, timeout=timeout)

    def expect_elements_to_have_texts(self, target: str | Locator, texts: list[str], timeout: float | None = None):
        """按顺序逐个比较 locator 命中的所有元素文字"""
        expect(self.locator(target)).to_have_text(texts, timeout=timeout)

    # ========= 辅助 =========
    def take_screenshot(self, name: str | None = None) -> Path:
        path = self.SCREENSHOT_DIR / f"{name or get_timestamp()}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=path, full_page=True)
        return path

    def scroll_to_element(self, target: str | Locator):
        self.locator(target).scroll_into_view_if_needed()

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self.page.evaluate(script, arg)
