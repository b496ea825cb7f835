"""MSO filter report parser.

Parsing runs in two stages: first the report is cut into raw channel blocks
(plus the optional shared sub block), then each block is split into filter
chunks whose parameters are extracted by the filter type registry.
"""

import re

from mso2storm.constants import SHARED_END, SHARED_START
from mso2storm.core.filters import classify, is_included


CHANNEL_BLOCK_RE = re.compile(r'Channel: "([^"]+)"(.*?)End Channel: "\1"', re.DOTALL)
FILTER_SPLIT_RE = re.compile(r"\r?\n(?=[A-Za-z]+\d+:)")
FILTER_HEADER_RE = re.compile(r"([A-Za-z]+\d+): (.+)")


def extract_channel_blocks(text):
    """Map channel name -> trimmed block text, in discovery order.

    A channel name seen twice keeps its first position but the later
    block's text.
    """
    blocks = {}
    for m in CHANNEL_BLOCK_RE.finditer(text):
        blocks[m.group(1)] = m.group(2).strip()
    return blocks


def extract_shared_block(text):
    start = text.find(SHARED_START)
    if start == -1:
        return None
    end = text.find(SHARED_END, start)
    if end == -1:
        return None
    return text[start:end].strip()


def split_filter_chunks(block):
    return [chunk for chunk in FILTER_SPLIT_RE.split(block) if chunk.strip()]


def parse_filter_chunk(chunk, options):
    lines = chunk.strip().splitlines()
    m = FILTER_HEADER_RE.match(lines[0])
    if not m:
        return None

    name = m.group(1)
    type_label = m.group(2).strip()
    if not is_included(type_label, options.included_types):
        return None

    kind = classify(type_label)
    if kind is None:
        return None
    return kind.extract(name, type_label, "\n".join(lines[1:]), options)


def parse_filters(block, options):
    filters = []
    for chunk in split_filter_chunks(block):
        entry = parse_filter_chunk(chunk, options)
        if entry is not None:
            filters.append(entry)
    return filters


def parse_report(text, options):
    """Return ({channel: [FilterEntry, ...]}, [shared FilterEntry, ...]).

    Channels with no usable filters are left out.
    """
    channels = {}
    for name, block in extract_channel_blocks(text).items():
        filters = parse_filters(block, options)
        if filters:
            channels[name] = filters

    shared = []
    shared_block = extract_shared_block(text)
    if shared_block:
        shared = parse_filters(shared_block, options)
    return channels, shared
