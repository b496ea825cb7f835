"""Filter type registry.

Each supported filter type registers one `FilterKind`: how to recognise its
type label, how to pull its parameters out of a report chunk, and how to
render it as a StormAudio filter line. Adding a filter type means adding
one entry to `FILTER_KINDS`.
"""

import re
from dataclasses import dataclass
from typing import Callable

from mso2storm.core.models import FilterEntry
from mso2storm.core.units import format_fixed, parse_number


PEQ_FREQ_RE = re.compile(r'Parameter "Center freq \(Hz\)" = ([\d.]+)')
PEQ_GAIN_RE = re.compile(r'Parameter "Boost \(dB\)" = ([-\d.]+)')
PEQ_Q_RBJ_RE = re.compile(r'Parameter "Q \(RBJ\)" = ([\d.]+)')
PEQ_Q_CLASSIC_RE = re.compile(r'"Classic" Q = ([\d.]+)')

AP_FREQ_RE = re.compile(r'Parameter "Freq of 180 deg phase \(Hz\)" = ([\d.]+)')
AP_Q_RE = re.compile(r'Parameter "All-pass Q" = ([\d.]+)')

ALL_PASS_ORDERS = (
    ("Second-Order", 2),
    ("First-Order", 1),
    ("Third-Order", 3),
    ("Fourth-Order", 4),
)
DEFAULT_ALL_PASS_ORDER = 2


def _contains(text, label):
    return label.lower() in text.lower()


def _number(pattern, text):
    m = pattern.search(text)
    if not m:
        return None
    return parse_number(m.group(1))


def select_q(q_rbj, q_classic, q_mode):
    if q_mode.lower() == "classic":
        return q_classic
    return q_rbj


def is_included(type_label, included_types):
    return any(_contains(type_label, t) for t in included_types)


def extract_parametric_eq(name, type_label, params, options):
    freq = _number(PEQ_FREQ_RE, params)
    gain = _number(PEQ_GAIN_RE, params)
    q_rbj = _number(PEQ_Q_RBJ_RE, params)
    if freq is None or gain is None or q_rbj is None:
        return None

    q_classic = _number(PEQ_Q_CLASSIC_RE, params)
    if q_classic is None:
        q_classic = q_rbj

    return FilterEntry(
        name=name,
        type_label=type_label,
        kind=PARAMETRIC_EQ.tag,
        frequency=freq,
        gain=gain,
        q=select_q(q_rbj, q_classic, options.q_mode),
        q_rbj=q_rbj,
        q_classic=q_classic,
    )


def extract_all_pass(name, type_label, params, options):
    freq = _number(AP_FREQ_RE, params)
    q = _number(AP_Q_RE, params)
    if freq is None or q is None:
        return None

    return FilterEntry(
        name=name,
        type_label=type_label,
        kind=ALL_PASS.tag,
        frequency=freq,
        gain=0.0,
        q=q,
        q_rbj=q,
        q_classic=q,
    )


def all_pass_order(type_label):
    for label, order in ALL_PASS_ORDERS:
        if _contains(type_label, label):
            return order
    return DEFAULT_ALL_PASS_ORDER


def render_parametric_eq(entry, index):
    return (
        f"Filter {index}: ON Bell Fc {format_fixed(entry.frequency, 4)} Hz "
        f"Gain {format_fixed(entry.gain, 5)} dB Q {format_fixed(entry.q, 4)}"
    )


def render_all_pass(entry, index):
    return (
        f"Filter {index}: ON All Pass Order {all_pass_order(entry.type_label)} "
        f"Fc {format_fixed(entry.frequency, 4)} Hz Gain 0 dB Q {format_fixed(entry.q, 6)}"
    )


@dataclass(frozen=True)
class FilterKind:
    tag: str
    label: str
    extract: Callable
    render: Callable

    def matches(self, type_label):
        return _contains(type_label, self.label)


PARAMETRIC_EQ = FilterKind("peq", "Parametric EQ", extract_parametric_eq, render_parametric_eq)
ALL_PASS = FilterKind("allpass", "All-Pass", extract_all_pass, render_all_pass)

FILTER_KINDS = (PARAMETRIC_EQ, ALL_PASS)


def classify(type_label):
    for kind in FILTER_KINDS:
        if kind.matches(type_label):
            return kind
    return None
