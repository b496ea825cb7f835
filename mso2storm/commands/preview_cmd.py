"""Preview command."""

import json
from dataclasses import asdict

from mso2storm.commands.common import ensure_existing_file, options_from_args, resolve_report_arg
from mso2storm.constants import ExitCode
from mso2storm.core.converter import build_preview
from mso2storm.export_pipeline import load_and_convert


def run(args):
    report_path = ensure_existing_file(resolve_report_arg(args))
    if report_path is None:
        print("error: report not found")
        return ExitCode.USAGE

    try:
        result = load_and_convert(str(report_path), options_from_args(args))
    except ValueError as exc:
        print(f"error: {exc}")
        return ExitCode.INVALID_REPORT
    except OSError as exc:
        print(f"error: could not read report: {exc}")
        return ExitCode.RUNTIME_ERROR

    preview = build_preview(result)
    if getattr(args, "json", False):
        print(json.dumps(asdict(preview), indent=2))
    else:
        print("mso2storm preview")
        print(f"- channels: {preview.channel_count} ({', '.join(preview.channel_names) or 'none'})")
        print(f"- shared sub file: {preview.has_shared_filters}")
        print(f"- filters exported: {preview.total_filters}")
        print(f"- gain settings: {preview.gain_count}")
        print(f"- delay settings: {preview.delay_count}")
        print(f"- inversions: {preview.has_inversions}")
        for message in preview.messages:
            print(f"    {message}")
    return ExitCode.OK
