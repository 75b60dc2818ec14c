import html
from pathlib import Path

from reporting.renderers.failure_panel import render_failure_panel


def _status_icon(status: str) -> str:
    return "❌" if status == "FAILED" else "✅"


def render_attempt_chain(attempts: list[dict]) -> str:
    """Attempt 1 ❌ → Attempt 2 ✅；状态没有变化时只给一行汇总"""
    statuses = {a["status"] for a in attempts}
    if len(statuses) == 1:
        status = attempts[0]["status"]
        label = "passed" if status == "PASSED" else f"{len(attempts)} failures"
        return f'<div class="attempt-chain muted">🔁 Attempts: {label}</div>'

    badges = [
        f'<span class="attempt-status {a["status"].lower()}">Attempt {a["attempt"]} {_status_icon(a["status"])}</span>'
        for a in attempts
    ]
    return '<div class="attempt-chain">' + '<span class="arrow">→</span>'.join(badges) + "</div>"


def _artifact_line(flag: bool, label: str) -> str:
    return f"{'✔️' if flag else '❌'} <span>{label}</span><br/>"


def render_attempt_card(a: dict, active: bool) -> str:
    aid = a["attempt"]
    failed = a["status"] == "FAILED"
    url = a.get("url") or "-"

    panel = ""
    if failed and a.get("base_dir"):
        panel = (f'<button type="button" class="panel-btn" onclick="togglePanel({aid});return false;">'
                 f'🖲️ View Failure Panel (Attempt {aid})</button>'
                 f'<div id="panel-{aid}" class="panel">{render_failure_panel(Path(a["base_dir"]), aid)}</div>')

    return f"""
    <div id="attempt-{aid}" class="card {'active' if active else ''}">
      <h3 class="card-header">Attempt {aid} {_status_icon(a['status'])} {a['status']}</h3>
      <hr class="dashed"/>
      <div class="info-block duration">🕑 Duration: <span>{a['duration']}s</span></div>
      <div class="info-block error">💥 Error: <pre>{html.escape(a['error'] or '-')}</pre></div>
      <div class="info-block url">🌏 URL: <span>{html.escape(url)}</span></div>
      <div class="info-block artifacts">
        <b>Artifacts</b><br/>
        {_artifact_line(a.get('has_screenshot', False), 'Screenshot')}
        {_artifact_line(a.get('has_video', False), 'Video')}
        {_artifact_line(a.get('has_trace', False), 'Trace')}
      </div>
      {panel}
    </div>
    """


def render_attempt_tabs(attempts: list[dict]) -> tuple[str, str]:
    """返回 (tabs, cards)，默认选中最后一次 attempt"""
    tabs = ""
    cards = ""
    last = len(attempts) - 1
    for i, a in enumerate(attempts):
        aid = a["attempt"]
        active = "active" if i == last else ""
        tabs += (f'<button type="button" id="tab-{aid}" class="tab {active}" '
                 f'onclick="show({aid});return false;">Attempt {aid}</button>')
        cards += render_attempt_card(a, i == last)
    return tabs, cards
