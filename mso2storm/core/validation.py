"""Quick format check before conversion."""

import re

from mso2storm.core.models import ValidationResult


FILTER_MARKER_RE = re.compile(r"[A-Za-z]+\d+:")


def validate_report(text):
    if not text or not text.strip():
        return ValidationResult(False, "MSO content cannot be empty")

    has_channel_markers = "Channel:" in text and "End Channel:" in text
    has_filter_markers = FILTER_MARKER_RE.search(text) is not None
    if not has_channel_markers and not has_filter_markers:
        return ValidationResult(
            False,
            "Content does not appear to be in MSO format. "
            "Expected 'Channel:' and 'FL##:' markers.",
        )
    return ValidationResult(True)
