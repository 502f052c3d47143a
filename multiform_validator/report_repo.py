import json
import os
import re
import tempfile
from typing import Any, Dict, List

from .config import settings

REPORT_NAME_RE = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.-]*", re.ASCII)


def report_path(name: str) -> str:
    """Path of a report inside the results directory; names cannot leave it."""
    if not isinstance(name, str) or not REPORT_NAME_RE.fullmatch(name):
        raise ValueError(f"Invalid report name: {name!r}")
    return os.path.join(settings.RESULTS, f"{name}.json")


def save_report(report: Dict[str, Any]) -> str:
    path = report_path(report["name"])
    os.makedirs(settings.RESULTS, exist_ok=True)
    # Readers only ever see a complete file at path.
    fd, tmp_path = tempfile.mkstemp(prefix=".report-", suffix=".tmp", dir=settings.RESULTS)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handler:
            json.dump(report, handler, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise
    return path


def load_report(name: str) -> Dict[str, Any]:
    with open(report_path(name), "r", encoding="utf-8") as handler:
        return json.load(handler)


def list_reports() -> List[str]:
    if not os.path.isdir(settings.RESULTS):
        return []
    return [
        filename[: -len(".json")]
        for filename in sorted(os.listdir(settings.RESULTS))
        if filename.endswith(".json") and not filename.startswith(".")
    ]
