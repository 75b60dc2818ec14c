"""login功能测试数据：可登录用户、不可登录用户及其错误提示
正常登录：standard / performance / problem / visual
登录失败：锁定用户、用户名或密码错误、用户名为空、密码为空、都为空
"""
from config.constants import ERROR_MESSAGES
from config.settings import SETTINGS
from data.models import User, UserCategory

VALID_USERS = {
    "standard": User(SETTINGS.standard_user, SETTINGS.default_password, UserCategory.STANDARD,
                     "Standard user with full access to the application"),
    "performance": User(SETTINGS.performance_user, SETTINGS.default_password, UserCategory.PERFORMANCE,
                        "User experiencing performance glitches during navigation"),
    "problem": User(SETTINGS.problem_user, SETTINGS.default_password, UserCategory.PROBLEM,
                    "User experiencing various issues with the application"),
    "visual": User("visual_user", SETTINGS.default_password, UserCategory.VISUAL,
                   "User for visual testing purposes"),
}

INVALID_USERS = {
    "locked": User(SETTINGS.locked_user, SETTINGS.default_password, UserCategory.LOCKED,
                   "User who has been locked out of the system",
                   error_msg=ERROR_MESSAGES["locked_out"]),
    "invalid": User("invalid_user", "invalid_password", UserCategory.ERROR,
                    "Non-existent user with invalid credentials",
                    error_msg=ERROR_MESSAGES["invalid_credentials"]),
    "wrong_password": User(SETTINGS.standard_user, "12345", UserCategory.ERROR,
                           "Existing user with a wrong password",
                           error_msg=ERROR_MESSAGES["invalid_credentials"]),
    "empty_username": User("", SETTINGS.default_password, UserCategory.ERROR,
                           "Empty username test case",
                           error_msg=ERROR_MESSAGES["username_required"]),
    "empty_password": User(SETTINGS.standard_user, "", UserCategory.ERROR,
                           "Empty password test case",
                           error_msg=ERROR_MESSAGES["password_required"]),
    "empty_both": User("", "", UserCategory.ERROR,
                       "Both username and password empty",
                       error_msg=ERROR_MESSAGES["username_required"]),
}

DEFAULT_USER = VALID_USERS["standard"]

# 登录态文件，need_login 用例共用
SAVE_LOGIN_STATE_FILE = "storage/login.json"


def get_valid_user(key: str = "standard") -> User:
    return VALID_USERS[key]


def get_invalid_user(key: str = "invalid") -> User:
    return INVALID_USERS[key]
