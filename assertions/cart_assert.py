class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def cart_item_count(actual: int, expect: int):
        """购物车页面商品行数"""
        assert actual == expect, f"购物车页面商品数量不符合预期：{actual}!={expect}"

    @staticmethod
    def contains_products(cart_names: list[str], product_names: list[str]):
        for name in product_names:
            assert name in cart_names, f"商品{name}，在购物车页面不存在：{cart_names}"

    @staticmethod
    def not_contains_product(cart_names: list[str], product_name: str):
        assert product_name not in cart_names, f"已移除的商品{product_name}，仍在购物车页面：{cart_names}"
