from config.settings import SETTINGS

BASE_URL = SETTINGS.base_url

# 页面路径，同时用作 URL 断言的片段
PAGE_PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "product_detail": "/inventory-item.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

URLS = {name: BASE_URL + path for name, path in PAGE_PATHS.items()}
