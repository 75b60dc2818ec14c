"""checkout功能测试数据：收货人信息"""
import random

from config.constants import ERROR_MESSAGES
from data.models import CheckoutInfo

VALID_CHECKOUT_INFO = CheckoutInfo("John", "Doe", "12345")

CHECKOUT_TEST_DATA = (
    CheckoutInfo("Jane", "Smith", "90210"),
    CheckoutInfo("Bob", "Johnson", "54321"),
    CheckoutInfo("Alice", "Williams", "67890"),
    CheckoutInfo("Test", "User", "11111"),
)

# 收货人信息缺失 -> 期望错误提示（SauceDemo 按 firstName、lastName、postalCode 顺序校验）
INVALID_CHECKOUT_INFO = {
    "missing_first_name": (CheckoutInfo("", "Doe", "12345"), ERROR_MESSAGES["first_name_required"]),
    "missing_last_name": (CheckoutInfo("John", "", "12345"), ERROR_MESSAGES["last_name_required"]),
    "missing_postal_code": (CheckoutInfo("John", "Doe", ""), ERROR_MESSAGES["postal_code_required"]),
    "all_fields_empty": (CheckoutInfo("", "", ""), ERROR_MESSAGES["first_name_required"]),
    "only_first_name": (CheckoutInfo("John", "", ""), ERROR_MESSAGES["last_name_required"]),
    "only_last_name": (CheckoutInfo("", "Doe", ""), ERROR_MESSAGES["first_name_required"]),
    "only_postal_code": (CheckoutInfo("", "", "12345"), ERROR_MESSAGES["first_name_required"]),
}

DEFAULT_CHECKOUT_INFO = VALID_CHECKOUT_INFO

_MISSING_FIELD_KEYS = {
    "first_name": "missing_first_name",
    "last_name": "missing_last_name",
    "postal_code": "missing_postal_code",
}


def get_random_checkout_info() -> CheckoutInfo:
    return random.choice(CHECKOUT_TEST_DATA)


def get_checkout_info_with_missing_field(field: str) -> CheckoutInfo:
    """field 不是三者之一时返回全空"""
    key = _MISSING_FIELD_KEYS.get(field, "all_fields_empty")
    return INVALID_CHECKOUT_INFO[key][0]
