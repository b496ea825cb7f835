import unittest
from datetime import datetime

from mso2storm.core.models import (
    ChannelDelaySetting,
    ChannelGainSetting,
    ChannelInversionSet,
    ConversionResult,
    DelayUnit,
)
from mso2storm.core.units import delay_in_all_units
from mso2storm.exporters.settings_exporter import has_channel_settings, render_channel_settings


NOW = datetime(2026, 10, 19, 8, 30, 0)


def make_result(inverted=None):
    return ConversionResult(
        gains=[ChannelGainSetting("SW1", -3.25), ChannelGainSetting("FL", 0.0)],
        delays=[ChannelDelaySetting("SW1", 4.12), ChannelDelaySetting("FL", 0.0)],
        inversions=ChannelInversionSet(list(inverted or [])),
    )


class UnitTests(unittest.TestCase):
    def test_delay_units(self):
        ms, m, ft = delay_in_all_units(1000.0)
        self.assertAlmostEqual(m, 343.0)
        self.assertAlmostEqual(ft, 343.0 * 3.28084)
        ms, m, ft = delay_in_all_units(3.28084, DelayUnit.FEET)
        self.assertAlmostEqual(m, 1.0)
        self.assertAlmostEqual(ms, 1000.0 / 343.0)


class SettingsReportTests(unittest.TestCase):
    def test_report_without_offset(self):
        text = render_channel_settings(make_result(["SW2", "SW1"]), now=NOW)
        lines = text.splitlines()
        self.assertEqual(lines[0], "MSO Channel Settings Export")
        self.assertEqual(lines[1], "Generated: 2026-10-19 08:30:00")
        self.assertNotIn("Offset applied", text)
        delay_rows = [l for l in lines if l.endswith(" ft") and not l.startswith("-")]
        self.assertEqual([r.split()[0] for r in delay_rows], ["FL", "SW1"])
        self.assertIn("4.12 ms", delay_rows[1])
        self.assertIn("1.413 m", delay_rows[1])
        self.assertIn("4.64 ft", delay_rows[1])
        self.assertIn("SW1            -3.25 dB", text)
        inverted = [l.split()[0] for l in lines if l.rstrip().endswith("Inverted")]
        self.assertEqual(inverted, ["SW1", "SW2"])
        self.assertEqual(lines[-1], "- Apply these settings in your audio processor")

    def test_report_with_offset(self):
        text = render_channel_settings(make_result(), 1.0, DelayUnit.METERS, now=NOW)
        self.assertIn("Offset applied: 2.92 ms / 1.000 m / 3.28 ft", text)
        self.assertIn("Relative Delays (MSO values without offset):", text)
        absolute = text.split("Absolute Delays (with offset applied):")[1]
        self.assertIn("7.04 ms", absolute)
        self.assertIn("2.413 m", absolute)
        self.assertIn("7.92 ft", absolute)
        self.assertIn("No channel inversions detected.", text)
        self.assertIn("- Absolute delays include the specified offset", text)

    def test_tiny_offset_is_ignored(self):
        text = render_channel_settings(make_result(), 0.0005, now=NOW)
        self.assertNotIn("Offset applied", text)

    def test_channels_sorted_ignoring_case(self):
        result = ConversionResult(
            gains=[ChannelGainSetting("SW1", 1.0), ChannelGainSetting("sw0", 2.0)],
            delays=[ChannelDelaySetting("SW1", 1.0), ChannelDelaySetting("sw0", 2.0)],
            inversions=ChannelInversionSet(["SW1", "sw0"]),
        )
        lines = render_channel_settings(result, now=NOW).splitlines()
        delay_rows = [l.split()[0] for l in lines if l.endswith(" ft") and not l.startswith("-")]
        gain_rows = [l.split()[0] for l in lines if l.endswith(" dB") and not l.startswith("-")]
        inverted = [l.split()[0] for l in lines if l.rstrip().endswith("Inverted")]
        self.assertEqual(delay_rows, ["sw0", "SW1"])
        self.assertEqual(gain_rows, ["sw0", "SW1"])
        self.assertEqual(inverted, ["sw0", "SW1"])

    def test_has_channel_settings(self):
        self.assertFalse(has_channel_settings(ConversionResult()))
        self.assertTrue(has_channel_settings(ConversionResult(inversions=ChannelInversionSet(["FL"]))))


if __name__ == "__main__":
    unittest.main()
