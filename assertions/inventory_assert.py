import re


class InventoryAssert:

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"期望商品数量：{expect_count}，实际商品数量：{actual_count}"

    @staticmethod
    def column_not_empty(values: list):
        assert values, "商品信息list为空"
        for value in values:
            assert value and value.strip(), f"存在商品信息为空：{values}"

    @staticmethod
    def product_price_format(prices: list[str]):
        assert prices, "商品价格list为空"
        for price in prices:
            assert re.match(r"^\$\d+(\.\d{2})$", price), f"商品价格格式错误：{price}"

    @staticmethod
    def sort_asc(values: list):
        assert values == sorted(values), f"未正序排列：{values}"

    @staticmethod
    def sort_desc(values: list):
        assert values == sorted(values, reverse=True), f"未倒序排列：{values}"

    @staticmethod
    def names_in_order(actual: list[str], expect: list[str] | tuple[str, ...]):
        assert list(actual) == list(expect), f"商品顺序与参照不一致：{actual} != {list(expect)}"
