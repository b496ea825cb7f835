"""Shared constants."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    RUNTIME_ERROR = 10
    INVALID_REPORT = 30


APP_NAME = "mso2storm"
DEFAULT_EQUALISER = "StormAudio"
DEFAULT_INCLUDED_TYPES = ("Parametric EQ", "All-Pass")

CHANNEL_FILE_SUFFIX = "_filters.txt"
SHARED_FILE_NAME = "shared_sub_filters.txt"
SETTINGS_FILE_NAME = "channel_settings.txt"
SHARED_CHANNEL_LABEL = "Shared Sub"

# report section labels
SHARED_START = "Shared sub channel:"
SHARED_END = "End shared sub channel"
FINAL_SETTINGS = "Final gain and delay/distance settings:"
GAIN_SETTINGS = "Gain settings:"
DELAY_SETTINGS = "Delay settings:"
INVERSIONS = "Channel inversions:"

LOG_RULE = "=" * 60
