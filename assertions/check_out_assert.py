import re

from data.models import OrderSummary


class CheckOutAssert:

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        """收件人信息缺失点击continue、下单完成页提示"""
        assert expect_msg in actual_msg, f"预期提示信息：{expect_msg}，不存在于{actual_msg}"

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert actual_msg == expect_msg, f"预期错误提示：{expect_msg}，实际：{actual_msg}"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column}为空！"

    @staticmethod
    def price_format(price: str):
        """去掉标签后的金额：$xx.xx"""
        assert re.match(r"^\$\d+(\.\d{2})$", price), f"价格格式错误：{price}"

    @staticmethod
    def order_price(summary: OrderSummary, tolerance: float = 0.01):
        """订单总价 = 商品总价 + 税"""
        expect = summary.item_total + summary.tax
        assert summary.is_consistent(tolerance), f"实际总金额{summary.total}!=预期总金额{expect:.2f}"

    @staticmethod
    def product_count(actual: int, expect: int):
        assert actual == expect, f"结算页面商品数量{actual} != 预期{expect}"
