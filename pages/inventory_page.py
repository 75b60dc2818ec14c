import logging

import allure
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from assertions.inventory_assert import InventoryAssert
from config.locators import INVENTORY_LOCATORS
from config.pages import PAGE_PATHS, URLS
from config.settings import SETTINGS
from data.models import SortOption
from pages.base_page import BasePage
from utils.common_utils import (is_sorted_alphabetically, is_sorted_ascending, is_sorted_descending,
                                is_sorted_reverse_alphabetically, parse_price)
from utils.exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)

# [selector, desc] -> 页面上的价格是否已按升序/降序排好
PRICES_SORTED_JS = """([selector, desc]) => {
    const prices = [...document.querySelectorAll(selector)]
        .map(el => parseFloat(el.textContent.replace("$", "")));
    return prices.every((p, i) => i === 0 || (desc ? prices[i - 1] >= p : prices[i - 1] <= p));
}"""


class InventoryPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.page_title = page.locator(INVENTORY_LOCATORS["page_title"])
        self.product_container = page.locator(INVENTORY_LOCATORS["product_container"])
        # 商品列表
        self.item_product = page.locator(INVENTORY_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(INVENTORY_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(INVENTORY_LOCATORS["item_product_price"])
        self.item_product_desc = page.locator(INVENTORY_LOCATORS["item_product_desc"])
        self.item_product_img = page.locator(INVENTORY_LOCATORS["item_product_img"])

        # 排序下拉框
        self.product_sort_type = page.locator(INVENTORY_LOCATORS["product_sort_type"])

        # 购物车
        self.shopping_cart_badge = page.locator(INVENTORY_LOCATORS["shopping_cart_badge"])
        self.shopping_cart_link = page.locator(INVENTORY_LOCATORS["shopping_cart_link"])

        # 左侧菜单
        self.menu_button = page.locator(INVENTORY_LOCATORS["menu_button"])
        self.menu_close_button = page.locator(INVENTORY_LOCATORS["menu_close_button"])
        self.all_items_link = page.locator(INVENTORY_LOCATORS["all_items_link"])
        self.logout_link = page.locator(INVENTORY_LOCATORS["logout_link"])
        self.about_link = page.locator(INVENTORY_LOCATORS["about_link"])
        self.reset_app_state_link = page.locator(INVENTORY_LOCATORS["reset_app_state_link"])

    # ================= 页面行为 =================
    def navigate_to_inventory_page(self):
        self.goto(URLS["inventory"])
        self.wait_for_page_load()

    def open_inventory(self):
        """打开列表页并等待第一个商品出现"""
        self.goto(URLS["inventory"])
        self.wait_for_element_to_be_visible(self.item_product.first)

    def find_product_row(self, product_name: str) -> Locator:
        """按商品名称精确匹配，每次扫描整个列表"""
        for row in self.item_product.all():
            if self.get_text(row.locator(INVENTORY_LOCATORS["item_product_name"])) == product_name:
                return row
        raise ProductNotFoundError(product_name)

    def add_product_to_cart_by_name(self, product_name: str):
        with allure.step(f"加购商品：{product_name}"):
            row = self.find_product_row(product_name)
            self.click(row.locator(INVENTORY_LOCATORS["add_product_button"]))
            logger.info("added %r to cart", product_name)

    def add_product_to_cart_by_index(self, index: int):
        rows = self.item_product.all()
        if not 0 <= index < len(rows):
            raise ProductNotFoundError(index)
        self.click(rows[index].locator(INVENTORY_LOCATORS["add_product_button"]))

    def remove_product_from_cart_by_name(self, product_name: str):
        with allure.step(f"列表页移除商品：{product_name}"):
            row = self.find_product_row(product_name)
            self.click(row.locator(INVENTORY_LOCATORS["remove_product_button"]))
            logger.info("removed %r from cart", product_name)

    def click_product_by_name(self, product_name: str):
        row = self.find_product_row(product_name)
        self.click(row.locator(INVENTORY_LOCATORS["item_product_name"]))

    def click_product_image_by_name(self, product_name: str):
        row = self.find_product_row(product_name)
        self.click(row.locator("img"))

    def sort_products_by(self, option: SortOption | str, wait_for_order: bool = True):
        """
        选择排序方式
        - wait_for_order=True：等到页面上的名称/价格已按所选方式排好（最多 ACTION_TIMEOUT）
        - wait_for_order=False：固定等待 SORT_SETTLE_MS
        """
        option = SortOption(option)
        with allure.step(f"商品排序：{option.value}"):
            self.select_dropdown(self.product_sort_type, option.value)
            if not wait_for_order:
                self.wait_for_timeout(SETTINGS.sort_settle_ms)
                if not self.is_sorted_by(option):
                    logger.warning("product listing is not ordered by %s after %sms",
                                   option.value, SETTINGS.sort_settle_ms)
                return
            try:
                self.wait_for_sorted(option)
            except (AssertionError, PlaywrightError) as e:
                # 排序结果交给用例自己的断言判断
                logger.warning("product listing is not ordered by %s after %sms: %s",
                               option.value, SETTINGS.action_timeout, e)

    def wait_for_sorted(self, option: SortOption):
        """名称用 expect 比对期望顺序，价格在浏览器里轮询判断"""
        if option in (SortOption.NAME_ASC, SortOption.NAME_DESC):
            expected = sorted(self.get_product_names(), key=str.lower,
                              reverse=option is SortOption.NAME_DESC)
            self.expect_elements_to_have_texts(self.item_product_name, expected, timeout=SETTINGS.action_timeout)
            return
        self.page.wait_for_function(
            PRICES_SORTED_JS,
            arg=[INVENTORY_LOCATORS["item_product_price"], option is SortOption.PRICE_DESC],
            timeout=SETTINGS.action_timeout,
        )

    def click_cart_icon(self):
        self.click(self.shopping_cart_link)

    def open_menu(self):
        self.click(self.menu_button)
        self.wait_for_element_to_be_visible(self.logout_link)

    def close_menu(self):
        self.click(self.menu_close_button)
        self.wait_for_element_to_be_hidden(self.logout_link)

    def logout(self):
        with allure.step("退出登录"):
            self.open_menu()
            self.click(self.logout_link)

    def reset_app_state(self):
        with allure.step("重置应用状态"):
            self.open_menu()
            self.click(self.reset_app_state_link)
            self.close_menu()

    def click_about_link(self):
        self.open_menu()
        self.click(self.about_link)

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        """页面上的标题文字（Products），不是 document.title"""
        return self.get_text(self.page_title)

    def get_product_count(self) -> int:
        return self.get_element_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_all_text(self.item_product_name)

    def get_product_descriptions(self) -> list[str]:
        return self.get_all_text(self.item_product_desc)

    def get_product_imgs(self) -> list[str | None]:
        return [self.get_attribute(img, "src") for img in self.item_product_img.all()]

    def get_product_prices(self) -> list[str]:
        return self.get_all_text(self.item_product_price)

    def get_product_prices_as_number(self) -> list[float]:
        return [parse_price(p) for p in self.get_product_prices()]

    def get_menu_items(self) -> list[str]:
        """侧边菜单链接文字，按显示顺序"""
        links = (self.all_items_link, self.about_link, self.logout_link, self.reset_app_state_link)
        return [self.get_text(link) for link in links]

    def get_current_sort_option(self) -> str:
        return self.get_input_value(self.product_sort_type)

    def get_cart_item_count(self) -> int:
        """购物车角标数字，角标不存在即购物车为空"""
        if self.is_element_visible(self.shopping_cart_badge):
            return int(self.get_text(self.shopping_cart_badge))
        return 0

    def is_cart_badge_visible(self) -> bool:
        return self.is_element_visible(self.shopping_cart_badge)

    def is_product_displayed(self, product_name: str) -> bool:
        return product_name in self.get_product_names()

    def is_sorted_by(self, option: SortOption) -> bool:
        if option is SortOption.NAME_ASC:
            return is_sorted_alphabetically(self.get_product_names())
        if option is SortOption.NAME_DESC:
            return is_sorted_reverse_alphabetically(self.get_product_names())
        if option is SortOption.PRICE_ASC:
            return is_sorted_ascending(self.get_product_prices_as_number())
        return is_sorted_descending(self.get_product_prices_as_number())

    # ========== 基础校验 ==========
    def verify_on_inventory_page(self):
        self.expect_url_to_contain(PAGE_PATHS["inventory"])
        self.expect_element_to_be_visible(self.product_container)

    def verify_base_info(self, expect_count: int):
        InventoryAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        InventoryAssert.column_not_empty(self.get_product_names())  # 商品名称非空
        InventoryAssert.column_not_empty(self.get_product_descriptions())  # 商品描述非空
        InventoryAssert.column_not_empty(self.get_product_imgs())  # 商品图片非空
        InventoryAssert.product_price_format(self.get_product_prices())  # 商品价格格式 $xx.xx
