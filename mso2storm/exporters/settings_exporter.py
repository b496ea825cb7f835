"""Channel settings report (delays, gains, inversions)."""

from datetime import datetime

from mso2storm.core.models import DelayUnit
from mso2storm.core.units import delay_in_all_units


OFFSET_EPSILON = 0.001


def _delay_table(delays, offset=(0.0, 0.0, 0.0)):
    off_ms, off_m, off_ft = offset
    lines = [
        f"{'Channel':<10} {'Milliseconds':<15} {'Meters':<12} {'Feet':<12}",
        f"{'-' * 10} {'-' * 15} {'-' * 12} {'-' * 12}",
    ]
    for d in sorted(delays, key=lambda d: d.channel.casefold()):
        ms, meters, feet = delay_in_all_units(d.delay_ms)
        lines.append(
            f"{d.channel:<10} {ms + off_ms:12.2f} ms {meters + off_m:9.3f} m {feet + off_ft:9.2f} ft"
        )
    return lines


def render_channel_settings(result, delay_offset=0.0, offset_unit=DelayUnit.MILLISECONDS, now=None):
    now = now or datetime.now()
    has_offset = abs(delay_offset) > OFFSET_EPSILON
    lines = [
        "MSO Channel Settings Export",
        f"Generated: {now:%Y-%m-%d %H:%M:%S}",
        "=" * 61,
        "",
    ]

    if result.delays:
        lines += ["DELAY SETTINGS", "-" * 41, ""]
        if has_offset:
            offset = delay_in_all_units(delay_offset, offset_unit)
            lines.append(
                f"Offset applied: {offset[0]:.2f} ms / {offset[1]:.3f} m / {offset[2]:.2f} ft"
            )
            lines.append("")
            lines.append("Relative Delays (MSO values without offset):")
            lines += _delay_table(result.delays)
            lines.append("")
            lines.append("Absolute Delays (with offset applied):")
            lines += _delay_table(result.delays, offset)
        else:
            lines += _delay_table(result.delays)
        lines.append("")

    if result.gains:
        lines += ["GAIN SETTINGS", "-" * 31, ""]
        lines.append(f"{'Channel':<10} {'Gain (dB)':<12}")
        lines.append(f"{'-' * 10} {'-' * 12}")
        for g in sorted(result.gains, key=lambda g: g.channel.casefold()):
            lines.append(f"{g.channel:<10} {g.gain_db:9.2f} dB")
        lines.append("")

    lines += ["CHANNEL INVERSIONS", "-" * 31, ""]
    if result.inversions.has_inversions:
        lines.append(f"{'Channel':<10} {'Status':<10}")
        lines.append(f"{'-' * 10} {'-' * 10}")
        for channel in sorted(result.inversions.channels, key=str.casefold):
            lines.append(f"{channel:<10} {'Inverted':<10}")
    else:
        lines.append("No channel inversions detected.")

    lines += [
        "",
        "=" * 61,
        "Notes:",
        "- Delay conversion assumes speed of sound = 343 m/s",
        "- Distance delays represent acoustic path difference",
    ]
    if has_offset:
        lines.append("- Relative delays show MSO values without offset")
        lines.append("- Absolute delays include the specified offset")
    lines.append("- Apply these settings in your audio processor")
    return "\n".join(lines) + "\n"


def has_channel_settings(result):
    return bool(result.delays or result.gains or result.inversions.has_inversions)
