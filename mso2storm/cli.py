"""CLI entry and command wiring."""

import argparse
import sys

from mso2storm.commands import convert_cmd, preview_cmd, validate_cmd
from mso2storm.constants import APP_NAME, DEFAULT_EQUALISER, DEFAULT_INCLUDED_TYPES, ExitCode
from mso2storm.core.models import DelayUnit


COMMANDS = {
    "convert": convert_cmd.run,
    "preview": preview_cmd.run,
    "validate": validate_cmd.run,
}


def _add_report_args(p):
    p.add_argument("report_pos", nargs="?", help="Path to MSO filter report (.txt)")
    p.add_argument("--report", help="Path to MSO filter report (.txt)")


def _add_option_args(p):
    p.add_argument("--q-type", choices=["rbj", "classic"], default="rbj", help="Q value to export")
    p.add_argument(
        "--exclude-type",
        action="append",
        choices=list(DEFAULT_INCLUDED_TYPES),
        help="Leave out a filter type (repeatable)",
    )
    p.add_argument(
        "--combine-shared",
        action="store_true",
        help="Prepend shared sub filters to every channel file",
    )
    p.add_argument("--equaliser", default=DEFAULT_EQUALISER, help="Equaliser name in output files")


def build_parser():
    parser = argparse.ArgumentParser(prog=APP_NAME)
    sub = parser.add_subparsers(dest="command")

    p_convert = sub.add_parser("convert", help="Convert report to StormAudio filter files")
    _add_report_args(p_convert)
    _add_option_args(p_convert)
    p_convert.add_argument("--outdir", help="Output directory")
    p_convert.add_argument(
        "--channel-settings",
        action="store_true",
        help="Also write channel_settings.txt with delays, gains and inversions",
    )
    p_convert.add_argument("--delay-offset", type=float, default=0.0)
    p_convert.add_argument(
        "--delay-unit",
        choices=[u.value for u in DelayUnit],
        default=DelayUnit.MILLISECONDS.value,
        help="Unit of --delay-offset",
    )

    p_preview = sub.add_parser("preview", help="Show what a conversion would produce")
    _add_report_args(p_preview)
    _add_option_args(p_preview)
    p_preview.add_argument("--json", action="store_true")

    p_validate = sub.add_parser("validate", help="Check that a file looks like an MSO report")
    _add_report_args(p_validate)

    return parser


def expand_report_shorthand(argv):
    """Expand the report-path shorthand into a `convert` command line.

    `mso2storm living_room.txt --combine-shared` is the same as
    `mso2storm convert --report living_room.txt --combine-shared`.
    """
    if not argv or argv[0] in COMMANDS or argv[0].startswith("-"):
        return argv
    report, *rest = argv
    return ["convert", "--report", report, *rest]


def main(argv=None):
    raw_argv = list(sys.argv[1:] if argv is None else argv)
    argv = expand_report_shorthand(raw_argv)
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    return COMMANDS[args.command](args)
