"""测试数据的记录类型：定义后只读"""
from dataclasses import dataclass
from enum import Enum


class UserCategory(str, Enum):
    STANDARD = "standard"
    LOCKED = "locked"
    PROBLEM = "problem"
    PERFORMANCE = "performance"
    ERROR = "error"
    VISUAL = "visual"


class SortOption(str, Enum):
    """商品排序下拉框的 value"""
    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


@dataclass(frozen=True)
class User:
    username: str
    password: str
    category: UserCategory
    description: str
    error_msg: str = ""  # 登录失败用例的期望提示，成功用例为空


@dataclass(frozen=True)
class Product:
    name: str
    price: float
    description: str
    image_path: str | None = None


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class CartItem:
    """购物车页面读回的商品行"""
    name: str
    price: float
    quantity: int


@dataclass(frozen=True)
class OrderSummary:
    """checkout-step-two 读回的订单金额"""
    item_total: float
    tax: float
    total: float

    def is_consistent(self, tolerance: float = 0.01) -> bool:
        return abs(self.total - (self.item_total + self.tax)) < tolerance
