LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "error_close_button": ".error-button",  # 错误提示关闭按钮
    "login_logo": ".login_logo",  # 登录页logo
}

INVENTORY_LOCATORS = {
    "page_title": ".title",  # 页面标题 Products
    "product_container": "[data-test='inventory-list']",  # 商品列表容器
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_product_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "item_product_img": ".inventory_item_img img",  # 单商品图片
    "add_product_button": "[data-test^='add-to-cart']",  # 商品添加按钮
    "remove_product_button": "[data-test^='remove']",  # 已加购商品按钮文字变为“Remove”
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
    # 左侧菜单
    "menu_button": "#react-burger-menu-btn",
    "menu_close_button": "#react-burger-cross-btn",
    "logout_link": "#logout_sidebar_link",
    "all_items_link": "#inventory_sidebar_link",
    "about_link": "#about_sidebar_link",
    "reset_app_state_link": "#reset_sidebar_link",
}

PRODUCT_DETAIL_LOCATORS = {
    "product_name": ".inventory_details_name",  # 商品名称
    "product_desc": ".inventory_details_desc",  # 商品描述
    "product_price": ".inventory_details_price",  # 商品价格
    "product_img": ".inventory_details_img",  # 商品图片
    "add_product_button": "[data-test^='add-to-cart']",  # 加购按钮
    "remove_product_button": "[data-test^='remove']",  # 移除按钮
    "back_button": "[data-test='back-to-products']",  # 返回商品列表
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
}

CART_LOCATORS = {
    "page_title": ".title",  # 页面标题 Your Cart
    "cart_item": ".cart_item",  # 购物车商品行
    "cart_item_name": "[data-test='inventory-item-name']",  # 单商品名称
    "cart_item_price": "[data-test='inventory-item-price']",  # 单商品价格
    "cart_item_desc": "[data-test='inventory-item-desc']",  # 单商品描述
    "cart_quantity": ".cart_quantity",  # 商品数量
    "remove_product_button": "[data-test^='remove']",  # 移除按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
}

CHECKOUT_STEP_ONE_LOCATORS = {
    "page_title": ".title",  # Checkout: Your Information
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "continue_button": "[data-test='continue']",  # 继续按钮
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "error_msg": "[data-test='error']",  # 未填写收货人信息提交错误提示 Error: First Name is required
    "error_close_button": ".error-button",  # 错误提示关闭按钮
}

CHECKOUT_STEP_TWO_LOCATORS = {
    "page_title": ".title",  # Checkout: Overview
    # 商品信息
    "item_list": ".cart_item",  # 订单确认页面商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_quantity": ".cart_quantity",  # 商品数量
    # 订单价格
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 运费信息value
    "products_price": "[data-test='subtotal-label']",  # 商品价格 Item total: $x
    "tax_price": "[data-test='tax-label']",  # 税 Tax: $x
    "order_price": "[data-test='total-label']",  # 订单价格 Total: $x
    # 操作步骤
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "finish_button": "[data-test='finish']",  # 完成按钮
}

CHECKOUT_COMPLETE_LOCATORS = {
    "page_title": ".title",  # Checkout: Complete!
    "complete_header": "[data-test='complete-header']",  # 完成页面提示信息
    "complete_text": "[data-test='complete-text']",  # 发货说明
    "back_home_button": "[data-test='back-to-products']",  # 返回首页
    "pony_express_img": ".pony_express",  # 完成页面图片
}
