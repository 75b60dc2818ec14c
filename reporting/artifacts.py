"""失败证据目录与 attempt 记录

artifacts/<module>/<class>/<test>/attempt_N/
    failure.png / url.txt / console_errors.json   (makereport hook 写入)
    *.webm / trace.zip                            (context teardown 移入)
"""
import json
from pathlib import Path

ARTIFACTS_DIR = Path("artifacts")
VIDEOS_DIR = Path("videos")
TRACING_DIR = Path("tracing")

# session 开始前清空
SESSION_DIRS = (ARTIFACTS_DIR, VIDEOS_DIR, TRACING_DIR, Path("screenshots"), Path("storage"))


def attempt_dir_name(attempt: int) -> str:
    return f"attempt_{attempt}"


def artifact_dir(item, attempt: int) -> Path:
    """用例 + attempt 对应的证据目录（不负责创建）"""
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    return ARTIFACTS_DIR / module_name / class_name / item.name / attempt_dir_name(attempt)


def new_attempt_record(attempt: int, passed: bool, duration: float, error: str = "") -> dict:
    return {
        "attempt": attempt,
        "status": "PASSED" if passed else "FAILED",
        "duration": round(duration, 2),
        "error": error,
        "url": None,  # teardown 阶段补
        "has_screenshot": False,
        "has_video": False,
        "has_trace": False,
        "base_dir": None,
    }


def find_attempt(attempts: list[dict], attempt: int) -> dict | None:
    return next((a for a in attempts if a["attempt"] == attempt), None)


def collect_artifact_flags(record: dict, target_dir: Path) -> dict:
    """按目录里实际落盘的文件回填 record（原地修改）"""
    url_file = target_dir / "url.txt"
    record.update({
        "has_screenshot": (target_dir / "failure.png").exists(),
        "has_video": any(target_dir.glob("*.webm")),
        "has_trace": (target_dir / "trace.zip").exists(),
        "url": url_file.read_text(encoding="utf-8") if url_file.exists() else None,
        "base_dir": str(target_dir),
    })
    return record


def write_failure_evidence(target_dir: Path, url: str, console_errors: list[dict]):
    target_dir.mkdir(parents=True, exist_ok=True)
    (target_dir / "url.txt").write_text(url, encoding="utf-8")
    (target_dir / "console_errors.json").write_text(
        json.dumps(console_errors, indent=2, ensure_ascii=False), encoding="utf-8")
