import io
import json
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from mso2storm.cli import main, expand_report_shorthand
from mso2storm.constants import ExitCode


SAMPLE = Path(__file__).parent / "data" / "sample_report.txt"


def run_cli(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class CliTests(unittest.TestCase):
    def test_report_path_shorthand_means_convert(self):
        argv = ["/tmp/report.txt", "--outdir", "/tmp/out"]
        normalized = expand_report_shorthand(argv)
        self.assertEqual(normalized[:3], ["convert", "--report", "/tmp/report.txt"])

    def test_shorthand_keeps_options(self):
        argv = ["room.txt", "--combine-shared", "--q-type", "classic"]
        self.assertEqual(
            expand_report_shorthand(argv),
            ["convert", "--report", "room.txt", "--combine-shared", "--q-type", "classic"],
        )
        self.assertEqual(expand_report_shorthand([]), [])

    def test_subcommand_args_unchanged(self):
        argv = ["preview", "--json"]
        self.assertEqual(expand_report_shorthand(argv), argv)

    def test_no_command_prints_help(self):
        code, out = run_cli([])
        self.assertEqual(code, ExitCode.USAGE)
        self.assertIn("usage:", out)


class ConvertCommandTests(unittest.TestCase):
    def test_convert_writes_files(self):
        with tempfile.TemporaryDirectory() as td:
            report = Path(td) / "mso.txt"
            shutil.copy(SAMPLE, report)
            code, out = run_cli([str(report), "--channel-settings", "--q-type", "classic"])
            self.assertEqual(code, ExitCode.OK)

            outdir = Path(td) / "mso_storm"
            names = sorted(p.name for p in outdir.iterdir())
            self.assertEqual(
                names,
                ["FL_filters.txt", "SW1_filters.txt", "channel_settings.txt", "shared_sub_filters.txt"],
            )
            self.assertIn("Q 12.7951", (outdir / "FL_filters.txt").read_text())
            self.assertIn("Using Q type: CLASSIC", out)

    def test_convert_combine_and_exclude(self):
        with tempfile.TemporaryDirectory() as td:
            outdir = Path(td) / "out"
            code, _ = run_cli(
                [
                    "convert",
                    str(SAMPLE),
                    "--outdir",
                    str(outdir),
                    "--combine-shared",
                    "--exclude-type",
                    "All-Pass",
                    "--equaliser",
                    "Storm ISP",
                ]
            )
            self.assertEqual(code, ExitCode.OK)
            self.assertEqual(sorted(p.name for p in outdir.iterdir()), ["FL_filters.txt", "SW1_filters.txt"])
            fl = (outdir / "FL_filters.txt").read_text()
            self.assertIn("Equaliser: Storm ISP", fl)
            self.assertNotIn("All Pass", fl)

    def test_missing_report(self):
        code, out = run_cli(["convert", "--report", "/nonexistent/report.txt"])
        self.assertEqual(code, ExitCode.USAGE)
        self.assertIn("error: report not found", out)

    def test_invalid_report(self):
        with tempfile.TemporaryDirectory() as td:
            report = Path(td) / "empty.txt"
            report.write_text("   \n")
            code, out = run_cli(["convert", str(report), "--outdir", str(Path(td) / "out")])
            self.assertEqual(code, ExitCode.INVALID_REPORT)
            self.assertIn("MSO content cannot be empty", out)
            self.assertFalse((Path(td) / "out").exists())


class PreviewAndValidateTests(unittest.TestCase):
    def test_preview_json(self):
        code, out = run_cli(["preview", str(SAMPLE), "--json"])
        self.assertEqual(code, ExitCode.OK)
        payload = json.loads(out)
        self.assertEqual(payload["channel_names"], ["FL", "SW1"])
        self.assertEqual(payload["total_filters"], 4)

    def test_validate(self):
        code, out = run_cli(["validate", str(SAMPLE)])
        self.assertEqual(code, ExitCode.OK)
        with tempfile.TemporaryDirectory() as td:
            other = Path(td) / "notes.txt"
            other.write_text("just some notes\n")
            code, out = run_cli(["validate", str(other)])
            self.assertEqual(code, ExitCode.INVALID_REPORT)
            self.assertIn("does not appear to be in MSO format", out)


if __name__ == "__main__":
    unittest.main()
