"""High-level export orchestration."""

import os

from mso2storm.constants import SETTINGS_FILE_NAME
from mso2storm.core.converter import convert
from mso2storm.core.models import DelayUnit, OutputFile
from mso2storm.core.validation import validate_report
from mso2storm.exporters.settings_exporter import has_channel_settings, render_channel_settings


def read_report(filepath):
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def load_and_convert(filepath, options=None):
    text = read_report(filepath)
    check = validate_report(text)
    if not check.is_valid:
        raise ValueError(check.error_message)
    return convert(text, options)


def is_plain_file_name(name):
    """True when `name` stays inside the directory it is joined to."""
    if not name or name in (".", ".."):
        return False
    return os.path.basename(name) == name and "\\" not in name and "/" not in name


def default_outdir(filepath):
    base = os.path.splitext(os.path.basename(filepath))[0]
    return os.path.join(os.path.dirname(filepath) or ".", f"{base}_storm")


def run_export(
    filepath,
    outdir=None,
    options=None,
    channel_settings=False,
    delay_offset=0.0,
    delay_unit=DelayUnit.MILLISECONDS,
):
    result = load_and_convert(filepath, options)

    print()
    print(result.formatted_log())

    files = result.output_files()
    if channel_settings and has_channel_settings(result):
        content = render_channel_settings(result, delay_offset, delay_unit)
        files.append(OutputFile(SETTINGS_FILE_NAME, content))

    if not files:
        print("\nNothing to export.")
        return {"result": result, "outdir": None, "paths": []}

    if outdir is None:
        outdir = default_outdir(filepath)
    os.makedirs(outdir, exist_ok=True)

    print(f"\nExporting to {outdir}/\n")
    paths = []
    for f in files:
        if not is_plain_file_name(f.name):
            print(f"  skipped {f.name!r}: channel name is not a plain file name")
            continue
        path = os.path.join(outdir, f.name)
        with open(path, "w", encoding="utf-8", newline="\n") as out:
            out.write(f.content)
        print(f"  {f.name}")
        paths.append(path)

    print("\nDone!")
    return {"result": result, "outdir": outdir, "paths": paths}
