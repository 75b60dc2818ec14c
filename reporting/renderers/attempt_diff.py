import html

ATTACHMENT_FIELDS = ("has_screenshot", "has_video", "has_trace")


def compare_field(attempts: list[dict], field: str) -> str:
    """ 比较同一字段在不同 attempts 中的差异
    :param attempts: 一个包含所有 attempts 信息的列表
    :param field: 需要比较的字段（例如 error, url, duration）
    :return: 差异文本（按首次出现顺序，每行一个值），没有差异返回空字符串 """
    values = []
    for attempt in attempts:
        value = attempt.get(field)
        if value not in values:
            values.append(value)
    return "\n".join(map(str, values)) if len(values) > 1 else ""


def compare_attachments(attempts: list[dict]) -> str:
    """ 比较各次 attempt 生成的附件（截图、视频、trace）是否一致 """
    attachment_diff = []
    for field in ATTACHMENT_FIELDS:
        diff = compare_field(attempts, field)
        if diff:
            attachment_diff.append(f"{field} difference: {diff.replace(chr(10), ', ')}")
    return ", ".join(attachment_diff)


def _diff_block(summary: str, content: str) -> str:
    return (f'<details><summary><button>{summary}</button></summary>'
            f'<pre>{html.escape(content)}</pre></details>')


def calculate_attempt_diff(attempts: list[dict]) -> str:
    """ 计算多个 attempts 之间的差异，返回可直接嵌入 Attempt Summary 的 html 片段 """
    checks = [
        ("🛑 Error Differences", compare_field(attempts, "error")),
        ("🌍 URL Differences", compare_field(attempts, "url")),
        ("🕣 Duration Differences", compare_field(attempts, "duration")),
        ("📎 Attachment Differences", compare_attachments(attempts)),
    ]
    return "".join(_diff_block(summary, diff) for summary, diff in checks if diff)
