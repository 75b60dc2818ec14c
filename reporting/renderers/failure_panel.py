import base64
import html
import json
from pathlib import Path

TRACE_VIEWER_COMMAND = "npx playwright show-trace Playwright-Trace.zip"


def render_trace_block() -> str:
    """打开 trace.zip 的操作提示"""
    return f"""
    <details>
      <summary><b>🧭 Playwright Trace</b></summary>
      <p class="hint">
        1️⃣ Click <b>📎 Playwright-Trace.zip</b><br/>
        2️⃣ Download <b>Playwright-Trace.zip</b><br/>
        3️⃣ Run in terminal:
      </p>
      <pre>{TRACE_VIEWER_COMMAND}</pre>
    </details>
    """


def _read_text(path: Path, default: str = "") -> str:
    return path.read_text(encoding="utf-8") if path.exists() else default


def render_failure_panel(base_dir: Path, attempt: int) -> str:
    """单次失败 attempt 的证据面板：URL、console errors、截图、视频/trace 提示"""
    page_url = _read_text(base_dir / "url.txt", "-")
    console_errors = json.loads(_read_text(base_dir / "console_errors.json", "[]"))
    console_pretty = json.dumps(console_errors, indent=2, ensure_ascii=False)

    screenshot = base_dir / "failure.png"
    if screenshot.exists():
        screenshot_base64 = base64.b64encode(screenshot.read_bytes()).decode("utf-8")
        screenshot_html = f'<img src="data:image/png;base64,{screenshot_base64}" />'
    else:
        screenshot_html = '<p class="hint">No screenshot</p>'

    video_hint = "See attachment: <b>📎 Video</b>" if any(base_dir.glob("*.webm")) else "No video"
    trace_block = render_trace_block() if (base_dir / "trace.zip").exists() else ""

    return f"""
    <div class="failure-panel">
      <h4>❌ Failure Panel (Attempt {attempt})</h4>
      <div class="section">
        <details><summary><b>📍 Page URL</b></summary><pre>{html.escape(page_url)}</pre></details>
      </div>
      <div class="section">
        <details><summary><b>💥 Console Errors</b></summary><pre>{html.escape(console_pretty)}</pre></details>
      </div>
      <div class="section">
        <details><summary><b>📸 Screenshot</b></summary>{screenshot_html}</details>
      </div>
      <div class="section">
        <details><summary><b>🎥 Video</b></summary><p class="hint">{video_hint}</p></details>
      </div>
      <div class="section">{trace_block}</div>
    </div>
    """
