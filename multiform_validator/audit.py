import datetime
import json
from typing import Any, Dict, List

from .errors import ValidatorError
from .logging_utils import setup_logger, jlog
from .validators import guess_validator


def load_record(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handler:
        record = json.load(handler)
    if not isinstance(record, dict):
        raise ValueError(f"{path}: expected a JSON object of field -> value")
    return record


def _coerce(value: Any, rule: str) -> Any:
    if value is None or isinstance(value, str):
        return value
    if rule == "port" and isinstance(value, int) and not isinstance(value, bool):
        return value
    return str(value)


def audit_field(field_name: str, value: Any) -> Dict[str, Any]:
    validator, hint, rule = guess_validator(field_name)
    entry: Dict[str, Any] = {
        "field": field_name,
        "rule": rule,
        "hint": hint,
        "value": value,
        "valid": None,
        "error": None,
    }
    if rule is None:
        return entry
    try:
        entry["valid"] = bool(validator(_coerce(value, rule)))
    except (ValidatorError, TypeError) as exc:
        entry["valid"] = False
        entry["error"] = str(exc) or type(exc).__name__
    return entry


def summarize(fields: List[Dict[str, Any]]) -> Dict[str, int]:
    return {
        "total": len(fields),
        "valid": sum(1 for field in fields if field["valid"] is True),
        "invalid": sum(1 for field in fields if field["valid"] is False),
        "unchecked": sum(1 for field in fields if field["valid"] is None),
    }


def audit_record(record: Dict[str, Any], name: str | None = None) -> Dict[str, Any]:
    """Check every field of a record against the rule its name suggests.

    Validator errors are kept in the field entry instead of aborting the run,
    so a single report lists everything that is wrong with the record.
    """
    logger = setup_logger()
    created_at = datetime.datetime.now(datetime.timezone.utc)
    name = name or f"audit_{created_at.strftime('%Y%m%dT%H%M%S')}"
    jlog(logger, "INFO", "AUDIT_START", name=name, fields=len(record))

    fields: List[Dict[str, Any]] = []
    for field_name, value in record.items():
        entry = audit_field(field_name, value)
        fields.append(entry)
        if entry["valid"] is None:
            jlog(logger, "INFO", "AUDIT_FIELD_SKIP", field=field_name, reason="no_rule")
        elif entry["valid"]:
            jlog(logger, "INFO", "AUDIT_FIELD_OK", field=field_name, rule=entry["rule"])
        else:
            jlog(
                logger,
                "WARN",
                "AUDIT_FIELD_FAIL",
                field=field_name,
                rule=entry["rule"],
                value=value,
                error=entry["error"],
            )

    summary = summarize(fields)
    jlog(logger, "INFO", "AUDIT_SUMMARY", name=name, **summary)
    return {
        "name": name,
        "created_at": created_at.isoformat(),
        "fields": fields,
        "summary": summary,
    }
