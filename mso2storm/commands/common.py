"""Shared command helpers."""

from pathlib import Path

from mso2storm.constants import DEFAULT_EQUALISER, DEFAULT_INCLUDED_TYPES
from mso2storm.core.models import ConversionOptions, DelayUnit


def resolve_report_arg(args):
    report = getattr(args, "report", None) or getattr(args, "report_pos", None)
    if report:
        return report
    try:
        value = input("Path to MSO filter report: ").strip()
    except EOFError:
        return None
    return value or None


def ensure_existing_file(path_text):
    """Report path as a Path, or None when it does not name an existing file."""
    if not path_text:
        return None
    report = Path(path_text).expanduser()
    return report if report.is_file() else None


def options_from_args(args):
    excluded = [t.lower() for t in (getattr(args, "exclude_type", None) or [])]
    included = tuple(t for t in DEFAULT_INCLUDED_TYPES if t.lower() not in excluded)
    return ConversionOptions(
        q_mode=getattr(args, "q_type", None) or "rbj",
        included_types=included,
        combine_shared=getattr(args, "combine_shared", False),
        equaliser_name=getattr(args, "equaliser", None) or DEFAULT_EQUALISER,
    )


def delay_unit_from_args(args):
    return DelayUnit(getattr(args, "delay_unit", None) or DelayUnit.MILLISECONDS.value)
