"""SauceDemo 商品目录（6个商品）及排序参照"""
import random

from data.models import Product

PRODUCTS = {
    "backpack": Product(
        "Sauce Labs Backpack", 29.99,
        "carry.allTheThings() with the sleek, streamlined Sly Pack that melds uncompromising style with "
        "unequaled laptop and tablet protection.",
        "/static/media/sauce-backpack-1200x1500.0a0b85a3.jpg"),
    "bike_light": Product(
        "Sauce Labs Bike Light", 9.99,
        "A red light isn't the desired state in testing but it sure helps when riding your bike at night. "
        "Water-resistant with 3 lighting modes, 1 AAA battery included.",
        "/static/media/bike-light-1200x1500.37c843b0.jpg"),
    "bolt_t_shirt": Product(
        "Sauce Labs Bolt T-Shirt", 15.99,
        "Get your testing superhero on with the Sauce Labs bolt T-shirt. From American Apparel, "
        "100% ringspun combed cotton, heather gray with red bolt.",
        "/static/media/bolt-shirt-1200x1500.c2599ac5.jpg"),
    "fleece_jacket": Product(
        "Sauce Labs Fleece Jacket", 49.99,
        "It's not every day that you come across a midweight quarter-zip fleece jacket capable of handling "
        "everything from a relaxing day outdoors to a busy day at the office.",
        "/static/media/sauce-pullover-1200x1500.51d7ffaf.jpg"),
    "onesie": Product(
        "Sauce Labs Onesie", 7.99,
        "Rib snap infant onesie for the junior automation engineer in development. Reinforced 3-snap bottom "
        "closure, two-needle hemmed sleeved and bottom won't unravel.",
        "/static/media/red-onesie-1200x1500.2ec615b2.jpg"),
    "t_shirt_red": Product(
        "Test.allTheThings() T-Shirt (Red)", 15.99,
        "This classic Sauce Labs t-shirt is perfect to wear when cozying up to your keyboard to automate a "
        "few tests. Super-soft and comfy ringspun combed cotton.",
        "/static/media/red-tatt-1200x1500.30dadef4.jpg"),
}

ALL_PRODUCTS = tuple(PRODUCTS.values())
TOTAL_PRODUCTS_COUNT = len(ALL_PRODUCTS)

# 排序参照
PRODUCT_NAMES_AZ = (
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
)
PRODUCT_NAMES_ZA = tuple(reversed(PRODUCT_NAMES_AZ))
PRICES_LOW_TO_HIGH = (7.99, 9.99, 15.99, 15.99, 29.99, 49.99)
PRICES_HIGH_TO_LOW = tuple(reversed(PRICES_LOW_TO_HIGH))

# 加购数量
ADD_PRODUCT_COUNT = 3
DELETE_PRODUCT_COUNT = 1


def get_product_by_name(name: str) -> Product | None:
    return next((p for p in ALL_PRODUCTS if p.name == name), None)


def get_random_product() -> Product:
    return random.choice(ALL_PRODUCTS)


def get_random_products(count: int) -> list[Product]:
    return random.sample(ALL_PRODUCTS, min(count, TOTAL_PRODUCTS_COUNT))


def get_cheapest_product() -> Product:
    return min(ALL_PRODUCTS, key=lambda p: p.price)


def get_most_expensive_product() -> Product:
    return max(ALL_PRODUCTS, key=lambda p: p.price)
