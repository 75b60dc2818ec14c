"""最后一次 attempt 结束后挂到 Allure 的 Attempt Summary（html 附件）"""
import logging

import allure

from reporting.renderers.attempt_diff import calculate_attempt_diff
from reporting.renderers.attempt_view import render_attempt_chain, render_attempt_tabs
from reporting.renderers.retry_insight import render_retry_insight

logger = logging.getLogger(__name__)

SUMMARY_CSS = """
  body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Arial; line-height: 1.6; color: #333; }
  .retry-insight { margin: 12px 0; padding: 12px 16px; border-left: 4px solid #f0ad4e; background: #fff8e1; }
  .retry-insight ul { list-style: none; padding-left: 0; margin: 6px 0 0; }
  .attempt-diff { margin: 16px 0; padding: 12px 14px; background: #f5f7fa; border-left: 4px solid #64b5f6; }
  .attempt-diff summary { list-style: none; cursor: pointer; }
  .attempt-diff summary button { width: 100%; text-align: left; padding: 6px 10px; font-weight: 600; }
  .attempt-diff pre { padding: 10px; border: 1px dashed #ccc; white-space: pre-wrap; max-height: 260px; overflow-y: auto; }
  .attempt-status { padding: 5px 10px; margin-right: 10px; font-weight: bold; }
  .attempt-status.failed { color: #f44336; }
  .attempt-status.passed { color: #4caf50; }
  .tab { padding: 8px 15px; margin-right: 8px; cursor: pointer; border-radius: 5px; }
  .tab.active { background-color: #00bcd4; }
  .card { display: none; margin-top: 3px; padding: 20px; border: 1px solid #ddd; border-radius: 5px; }
  .card.active { display: block; }
  hr.dashed { border: none; border-top: 1px dashed #aaa; margin: 10px 0; }
  .info-block { padding: 12px; margin: 8px 0; border-radius: 5px; background-color: #f4f4f4; font-size: 14px; }
  .info-block.duration { background-color: #e0f7fa; border-left: 4px solid #00bcd4; }
  .info-block.error { background-color: #ffebee; border-left: 4px solid #f44336; color: #d32f2f; }
  .info-block.error pre { white-space: pre-wrap; font-size: 12px; }
  .info-block.url { background-color: #f1f8e9; border-left: 4px solid #8bc34a; }
  .info-block.artifacts { background-color: #fff9c4; border-left: 4px solid #ffeb3b; }
  .panel-btn { padding: 8px 16px; background-color: #007bff; color: white; border: none; border-radius: 5px; }
  .panel { display: none; margin-top: 16px; padding: 5px; border: 1px solid #ddd; background-color: #fafafa; }
  .failure-panel pre { background-color: #f4f4f4; padding: 10px; white-space: pre-wrap; font-size: 12px; }
  img { max-width: 100%; border: 1px solid #ccc; }
"""

SUMMARY_JS = """
function show(id){
  document.querySelectorAll('.card').forEach(e=>e.classList.remove('active'));
  document.querySelectorAll('.tab').forEach(e=>e.classList.remove('active'));
  document.getElementById('attempt-'+id).classList.add('active');
  document.getElementById('tab-'+id).classList.add('active');
}
function togglePanel(id) {
  const panel = document.getElementById('panel-'+id);
  panel.style.display = panel.style.display === 'block' ? 'none' : 'block';
}
"""


def last_failed_attempt(attempts: list[dict]) -> int:
    """页面打开时默认展示的 attempt：最后一次失败，没有失败则最后一次"""
    return max((a["attempt"] for a in attempts if a["status"] == "FAILED"),
               default=attempts[-1]["attempt"])


def build_attempt_summary(attempts: list[dict]) -> str:
    tabs, cards = render_attempt_tabs(attempts)
    return f"""<!DOCTYPE html>
<html>
<head>
<style>{SUMMARY_CSS}</style>
<script>{SUMMARY_JS}
window.onload = function () {{ show({last_failed_attempt(attempts)}); }}
</script>
</head>
<body>
<h2>🔁 Attempt Summary</h2>
<div class="retry-insight"><h3>🧠 Retry Insight</h3>{render_retry_insight(attempts)}</div>
<div class="attempt-diff"><h3>🔍 Attempt Diff Analysis</h3>{calculate_attempt_diff(attempts)}</div>
{render_attempt_chain(attempts)}
<br/>
<div class="tabs">{tabs}</div>
{cards}
</body>
</html>
"""


def attach_attempt_summary(attempts: list[dict]):
    if not attempts:
        return
    logger.debug("attach attempt summary for %s attempts", len(attempts))
    allure.attach(build_attempt_summary(attempts), name="Attempt Summary",
                  attachment_type=allure.attachment_type.HTML)
