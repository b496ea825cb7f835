"""Numeric parsing/formatting and delay unit helpers."""

from mso2storm.core.models import DelayUnit


SPEED_OF_SOUND_M_PER_S = 343.0
FEET_PER_METER = 3.28084


def parse_number(text):
    """Parse a decimal string the same way regardless of locale.

    Returns None when the text is not a plain decimal number.
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


def format_fixed(value, digits):
    return f"{value:.{digits}f}"


def ms_to_meters(delay_ms):
    return (delay_ms / 1000.0) * SPEED_OF_SOUND_M_PER_S


def meters_to_ms(meters):
    return (meters / SPEED_OF_SOUND_M_PER_S) * 1000.0


def meters_to_feet(meters):
    return meters * FEET_PER_METER


def feet_to_meters(feet):
    return feet / FEET_PER_METER


def delay_in_all_units(value, unit=DelayUnit.MILLISECONDS):
    """Return (ms, m, ft) for a delay or distance given in `unit`."""
    if unit is DelayUnit.MILLISECONDS:
        meters = ms_to_meters(value)
        return value, meters, meters_to_feet(meters)
    if unit is DelayUnit.METERS:
        return meters_to_ms(value), value, meters_to_feet(value)
    if unit is DelayUnit.FEET:
        meters = feet_to_meters(value)
        return meters_to_ms(meters), meters, value
    raise ValueError(f"unknown delay unit: {unit!r}")
