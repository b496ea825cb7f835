"""Shared data models."""

from dataclasses import dataclass, field
from enum import Enum

from mso2storm.constants import (
    CHANNEL_FILE_SUFFIX,
    DEFAULT_EQUALISER,
    DEFAULT_INCLUDED_TYPES,
    SHARED_FILE_NAME,
)


class DelayUnit(Enum):
    MILLISECONDS = "ms"
    METERS = "m"
    FEET = "ft"


@dataclass(frozen=True)
class ConversionOptions:
    q_mode: str = "rbj"
    included_types: tuple[str, ...] = DEFAULT_INCLUDED_TYPES
    combine_shared: bool = False
    equaliser_name: str = DEFAULT_EQUALISER


@dataclass(frozen=True)
class FilterEntry:
    name: str
    type_label: str
    kind: str
    frequency: float
    gain: float
    q: float
    q_rbj: float
    q_classic: float


@dataclass
class ChannelGainSetting:
    channel: str
    gain_db: float


@dataclass
class ChannelDelaySetting:
    channel: str
    delay_ms: float


@dataclass
class ChannelInversionSet:
    channels: list[str] = field(default_factory=list)

    @property
    def has_inversions(self):
        return bool(self.channels)


@dataclass
class OutputFile:
    name: str
    content: str


@dataclass
class StageOutcome:
    """Value produced by one conversion stage, or the error that stopped it."""

    value: object = None
    log: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self):
        return self.error is None


@dataclass
class ConversionResult:
    channel_files: list[OutputFile] = field(default_factory=list)
    shared_file: str | None = None
    total_processed: int = 0
    total_exported: int = 0
    log: list[str] = field(default_factory=list)
    gains: list[ChannelGainSetting] = field(default_factory=list)
    delays: list[ChannelDelaySetting] = field(default_factory=list)
    inversions: ChannelInversionSet = field(default_factory=ChannelInversionSet)

    def add_channel_file(self, channel, content):
        name = f"{channel}{CHANNEL_FILE_SUFFIX}"
        self.channel_files = [f for f in self.channel_files if f.name != name]
        self.channel_files.append(OutputFile(name, content))
        return name

    def channel_file(self, name):
        for f in self.channel_files:
            if f.name == name:
                return f.content
        return None

    def channel_names(self):
        return [f.name[: -len(CHANNEL_FILE_SUFFIX)] for f in self.channel_files]

    def output_files(self):
        files = list(self.channel_files)
        if self.shared_file:
            files.append(OutputFile(SHARED_FILE_NAME, self.shared_file))
        return files

    def formatted_log(self):
        return "\n".join(self.log)


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None


@dataclass
class ConversionPreview:
    channel_count: int = 0
    has_shared_filters: bool = False
    total_filters: int = 0
    messages: list[str] = field(default_factory=list)
    gain_count: int = 0
    delay_count: int = 0
    has_inversions: bool = False
    channel_names: list[str] = field(default_factory=list)
