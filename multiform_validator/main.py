import argparse
import sys
from typing import List

from . import report_repo
from .audit import audit_record, load_record
from .errors import ValidatorError
from .logging_utils import setup_logger, jlog
from .validators import HINTS, VALIDATORS, get_validator


def cmd_rules() -> int:
    for rule in sorted(VALIDATORS):
        print(f"{rule:<12} {HINTS[rule]}")
    return 0


def cmd_check(rule: str, value: str) -> int:
    logger = setup_logger()
    try:
        validator = get_validator(rule)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 2
    try:
        ok = validator(value)
    except ValidatorError as exc:
        jlog(logger, "ERROR", "CHECK_INPUT_ERROR", rule=rule, error=str(exc))
        print(str(exc), file=sys.stderr)
        return 2
    jlog(logger, "DEBUG", "CHECK_DONE", rule=rule, valid=ok)
    print("true" if ok else "false")
    return 0 if ok else 1


def cmd_audit(data_path: str, name: str | None, save: bool) -> int:
    logger = setup_logger()
    record = load_record(data_path)
    report = audit_record(record, name=name)
    for field in report["fields"]:
        if field["valid"] is None:
            status = "--"
        elif field["valid"]:
            status = "OK"
        else:
            status = "FAIL"
        line = f"[{status}] {field['field']}"
        if field["rule"]:
            line += f" ({field['rule']})"
        if field["error"]:
            line += f": {field['error']}"
        print(line)
    summary = report["summary"]
    print(
        f"{summary['valid']} válido(s), {summary['invalid']} inválido(s), "
        f"{summary['unchecked']} sem regra, de {summary['total']} campo(s)."
    )
    if save:
        out_path = report_repo.save_report(report)
        jlog(logger, "INFO", "AUDIT_SAVED", path=out_path)
        print(f"[OK] Relatório salvo em: {out_path}")
    return 0 if summary["invalid"] == 0 else 1


def cmd_reports() -> int:
    names = report_repo.list_reports()
    if not names:
        print("Nenhum relatório salvo. Rode: multiform-validator audit --data <arquivo> --save")
        return 0
    for idx, name in enumerate(names, 1):
        print(f"{idx}. {name}")
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="multiform-validator")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("rules")

    check_parser = sub.add_parser("check")
    check_parser.add_argument("rule")
    check_parser.add_argument("value")

    audit_parser = sub.add_parser("audit")
    audit_parser.add_argument("--data", required=True)
    audit_parser.add_argument("--name", default=None)
    audit_parser.add_argument("--save", action="store_true")

    sub.add_parser("reports")

    args = parser.parse_args(argv)
    if args.cmd == "rules":
        return cmd_rules()
    if args.cmd == "check":
        return cmd_check(args.rule, args.value)
    if args.cmd == "audit":
        return cmd_audit(args.data, args.name, args.save)
    if args.cmd == "reports":
        return cmd_reports()
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
