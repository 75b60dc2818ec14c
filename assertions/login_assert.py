class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert actual_msg == expect_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def error_message_contains(actual_msg: str, *fragments: str):
        for fragment in fragments:
            assert fragment in actual_msg, f"登录错误提示信息：{actual_msg}，不包含：{fragment}"
