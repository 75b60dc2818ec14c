"""被测应用的固定文案、排序值、超时"""

# 毫秒
TIMEOUTS = {
    "action": 10000,  # 单次点击/输入/条件等待
    "navigation": 30000,
    "default": 30000,  # expect 断言、wait_for_element*
}

ERROR_MESSAGES = {
    "username_required": "Epic sadface: Username is required",
    "password_required": "Epic sadface: Password is required",
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "locked_out": "Epic sadface: Sorry, this user has been locked out.",
    "first_name_required": "Error: First Name is required",
    "last_name_required": "Error: Last Name is required",
    "postal_code_required": "Error: Postal Code is required",
}

SUCCESS_MESSAGES = {
    "order_complete_header": "Thank you for your order!",
    "order_dispatch": "Your order has been dispatched, and will arrive just as fast as the pony can get there!",
}

PAGE_TITLES = {
    "inventory": "Products",
    "cart": "Your Cart",
    "checkout_step_one": "Checkout: Your Information",
    "checkout_step_two": "Checkout: Overview",
    "checkout_complete": "Checkout: Complete!",
}

# 结算页金额标签前缀
SUMMARY_LABELS = {
    "item_total": "Item total: ",
    "tax": "Tax: ",
    "total": "Total: ",
}

# 订单总价 = 商品总价 + 税 的允许误差
TOTAL_TOLERANCE = 0.01

MENU_ITEMS = {
    "all_items": "All Items",
    "about": "About",
    "logout": "Logout",
    "reset_app_state": "Reset App State",
}
