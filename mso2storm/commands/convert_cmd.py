"""Convert command."""

from mso2storm.commands.common import (
    delay_unit_from_args,
    ensure_existing_file,
    options_from_args,
    resolve_report_arg,
)
from mso2storm.constants import ExitCode
from mso2storm.export_pipeline import run_export


def run(args):
    report = resolve_report_arg(args)
    if not report:
        print("error: missing report path")
        return ExitCode.USAGE

    report_path = ensure_existing_file(report)
    if report_path is None:
        print(f"error: report not found: {report}")
        return ExitCode.USAGE

    try:
        export = run_export(
            str(report_path),
            args.outdir,
            options=options_from_args(args),
            channel_settings=args.channel_settings,
            delay_offset=args.delay_offset,
            delay_unit=delay_unit_from_args(args),
        )
    except ValueError as exc:
        print(f"error: {exc}")
        return ExitCode.INVALID_REPORT
    except OSError as exc:
        print(f"error: export failed: {exc}")
        return ExitCode.RUNTIME_ERROR

    if not export["paths"]:
        return ExitCode.RUNTIME_ERROR
    return ExitCode.OK
