"""Validate command."""

from mso2storm.commands.common import ensure_existing_file, resolve_report_arg
from mso2storm.constants import ExitCode
from mso2storm.core.validation import validate_report
from mso2storm.export_pipeline import read_report


def run(args):
    report_path = ensure_existing_file(resolve_report_arg(args))
    if report_path is None:
        print("error: report not found")
        return ExitCode.USAGE

    check = validate_report(read_report(str(report_path)))
    if not check.is_valid:
        print(f"invalid: {check.error_message}")
        return ExitCode.INVALID_REPORT
    print("ok")
    return ExitCode.OK
