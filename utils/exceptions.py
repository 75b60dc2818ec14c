class UITestError(Exception):
    """UI 测试框架自身抛出的异常基类"""


class ConfigError(UITestError):
    """环境变量配置非法"""


class ElementNotFoundError(UITestError):
    """按名称/下标查找页面元素未命中"""


class ProductNotFoundError(ElementNotFoundError):
    """商品列表、购物车中找不到指定商品"""

    def __init__(self, product: str | int, where: str = "inventory"):
        self.product = product
        self.where = where
        if isinstance(product, int):
            msg = f"{where} 中商品下标越界：{product}"
        else:
            msg = f"{where} 中找不到商品：{product!r}"
        super().__init__(msg)


class CartNotEmptiedError(ElementNotFoundError):
    """删除购物车商品后行数没有减少"""
