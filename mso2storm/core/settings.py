"""Gain, delay and polarity settings from the end of an MSO report."""

import re

from mso2storm.constants import DELAY_SETTINGS, FINAL_SETTINGS, GAIN_SETTINGS, INVERSIONS
from mso2storm.core.models import (
    ChannelDelaySetting,
    ChannelGainSetting,
    ChannelInversionSet,
    StageOutcome,
)
from mso2storm.core.units import parse_number


GAIN_LINE_RE = re.compile(r"(\w+)\s+gain:\s*([-\d.]+)\s*dB", re.IGNORECASE)
DELAY_LINE_RE = re.compile(r"(\w+)\s+delay:\s*([-\d.]+)\s*msec", re.IGNORECASE)
INVERT_LINE_RE = re.compile(r"(\w+)\s*:?\s*invert", re.IGNORECASE)


def _stripped_lines(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def extract_section(text, start_marker, end_marker=None):
    """Trimmed text after `start_marker`, up to `end_marker` if it follows."""
    start = text.find(start_marker)
    if start == -1:
        return ""
    start += len(start_marker)
    if end_marker is not None:
        end = text.find(end_marker, start)
        if end != -1:
            return text[start:end].strip()
    return text[start:].strip()


def _parse_lines(text, pattern):
    values = []
    for line in _stripped_lines(text):
        m = pattern.search(line)
        if not m:
            continue
        value = parse_number(m.group(2))
        if value is not None:
            values.append((m.group(1), value))
    return values


def parse_gain_lines(text):
    return [ChannelGainSetting(ch, v) for ch, v in _parse_lines(text, GAIN_LINE_RE)]


def parse_delay_lines(text):
    return [ChannelDelaySetting(ch, v) for ch, v in _parse_lines(text, DELAY_LINE_RE)]


def extract_gain_and_delay(text):
    """Return StageOutcome with value (gains, delays)."""
    start = text.find(FINAL_SETTINGS)
    if start == -1:
        return StageOutcome(
            value=([], []),
            log=["Warning: Final gain and delay settings section not found"],
        )

    end = text.find(INVERSIONS, start)
    if end == -1:
        end = len(text)
    section = text[start:end]

    gains = parse_gain_lines(extract_section(section, GAIN_SETTINGS, DELAY_SETTINGS))
    delays = parse_delay_lines(extract_section(section, DELAY_SETTINGS))
    return StageOutcome(value=(gains, delays))


def extract_inversions(text):
    """Return StageOutcome with a ChannelInversionSet value.

    Scanning stops at a "No inversions" line; lines after it are not read.
    """
    inversions = ChannelInversionSet()
    start = text.find(INVERSIONS)
    if start == -1:
        return StageOutcome(value=inversions, log=["Warning: Channel inversions section not found"])

    for line in _stripped_lines(text[start:])[1:]:
        if line.lower() == "no inversions":
            break
        if "invert" not in line.lower():
            continue
        m = INVERT_LINE_RE.search(line)
        if m:
            inversions.channels.append(m.group(1))
    return StageOutcome(value=inversions)
