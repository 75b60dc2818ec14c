import logging

from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.constants import SUMMARY_LABELS, TOTAL_TOLERANCE
from config.locators import CHECKOUT_STEP_TWO_LOCATORS
from config.pages import PAGE_PATHS, URLS
from data.models import OrderSummary
from pages.base_page import BasePage
from utils.common_utils import parse_price

logger = logging.getLogger(__name__)


class CheckoutStepTwoPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.page_title = page.locator(CHECKOUT_STEP_TWO_LOCATORS["page_title"])
        #  商品信息
        self.item_product = page.locator(CHECKOUT_STEP_TWO_LOCATORS["item_list"])
        self.item_product_name = page.locator(CHECKOUT_STEP_TWO_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(CHECKOUT_STEP_TWO_LOCATORS["item_product_price"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_STEP_TWO_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_STEP_TWO_LOCATORS["shipping_information"])  # 运费信息value
        self.item_total = page.locator(CHECKOUT_STEP_TWO_LOCATORS["products_price"])  # 商品总价格
        self.tax = page.locator(CHECKOUT_STEP_TWO_LOCATORS["tax_price"])  # 税
        self.total = page.locator(CHECKOUT_STEP_TWO_LOCATORS["order_price"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_STEP_TWO_LOCATORS["cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_STEP_TWO_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def navigate_to_checkout_step_two(self):
        self.goto(URLS["checkout_step_two"])
        self.wait_for_page_load()

    def click_finish(self):
        self.click(self.finish_button)

    def click_cancel(self):
        """取消订单，回到商品列表"""
        self.click(self.cancel_button)

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        return self.get_text(self.page_title)

    def get_cart_item_count(self) -> int:
        return self.get_element_count(self.item_product)

    def get_cart_item_names(self) -> list[str]:
        return self.get_all_text(self.item_product_name)

    def get_cart_item_prices(self) -> list[str]:
        return self.get_all_text(self.item_product_price)

    def get_payment_info(self) -> str:
        return self.get_text(self.payment_information)

    def get_shipping_info(self) -> str:
        return self.get_text(self.shipping_information)

    def _label_value(self, target, key: str) -> str:
        # "Item total: $39.98" -> "$39.98"
        return self.get_text(target).replace(SUMMARY_LABELS[key], "").strip()

    def get_item_total(self) -> str:
        return self._label_value(self.item_total, "item_total")

    def get_tax(self) -> str:
        return self._label_value(self.tax, "tax")

    def get_total(self) -> str:
        return self._label_value(self.total, "total")

    def get_item_total_as_number(self) -> float:
        return parse_price(self.get_item_total())

    def get_tax_as_number(self) -> float:
        return parse_price(self.get_tax())

    def get_total_as_number(self) -> float:
        return parse_price(self.get_total())

    def get_order_summary(self) -> OrderSummary:
        return OrderSummary(item_total=self.get_item_total_as_number(),
                            tax=self.get_tax_as_number(),
                            total=self.get_total_as_number())

    def is_product_in_order(self, product_name: str) -> bool:
        return product_name in self.get_cart_item_names()

    def is_finish_button_visible(self) -> bool:
        return self.is_element_visible(self.finish_button)

    def is_cancel_button_visible(self) -> bool:
        return self.is_element_visible(self.cancel_button)

    # ========== checkout-step-two 基本验证 ==========
    def verify_total_calculation(self) -> bool:
        """订单总价 = 商品总价 + 税（误差 0.01）"""
        summary = self.get_order_summary()
        ok = summary.is_consistent(TOTAL_TOLERANCE)
        if not ok:
            logger.warning("order total mismatch: %s", summary)
        return ok

    def verify_order_base_info(self):
        """支付、运费信息非空，金额格式 $xx.xx，总价 = 商品总价 + 税"""
        CheckOutAssert.not_empty(self.get_payment_info())
        CheckOutAssert.not_empty(self.get_shipping_info())
        for price in (self.get_item_total(), self.get_tax(), self.get_total()):
            CheckOutAssert.price_format(price)
        CheckOutAssert.order_price(self.get_order_summary(), TOTAL_TOLERANCE)

    def verify_on_checkout_step_two(self):
        self.expect_url_to_contain(PAGE_PATHS["checkout_step_two"])
        self.expect_element_to_be_visible(self.finish_button)
        self.expect_element_to_be_visible(self.item_total)
