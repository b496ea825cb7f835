"""MSO report -> StormAudio conversion.

`convert` never raises: every stage returns a StageOutcome, and whatever
goes wrong ends up as a line in the result log.
"""

from mso2storm.constants import LOG_RULE, SHARED_CHANNEL_LABEL, SHARED_FILE_NAME
from mso2storm.core.models import (
    ChannelInversionSet,
    ConversionOptions,
    ConversionPreview,
    ConversionResult,
    StageOutcome,
)
from mso2storm.core.parser import parse_report
from mso2storm.core.settings import extract_gain_and_delay, extract_inversions
from mso2storm.exporters.storm_exporter import render_storm_filters


def run_stage(func, *args):
    try:
        outcome = func(*args)
    except Exception as exc:
        return StageOutcome(error=str(exc))
    if isinstance(outcome, StageOutcome):
        return outcome
    return StageOutcome(value=outcome)


def _write_channels(result, channels, shared, options, today):
    combine = options.combine_shared and bool(shared)
    for name, filters in channels.items():
        if combine:
            combined = shared + filters
            content = render_storm_filters(combined, name, options.equaliser_name, today)
            fname = result.add_channel_file(name, content)
            result.log.append(
                f"Channel {name}: {len(shared)} shared + {len(filters)} channel = "
                f"{len(combined)} total filters exported to {fname}"
            )
            result.total_processed += len(filters)
            result.total_exported += len(combined)
        else:
            content = render_storm_filters(filters, name, options.equaliser_name, today)
            fname = result.add_channel_file(name, content)
            result.log.append(f"Channel {name}: {len(filters)} filters exported to {fname}")
            result.total_processed += len(filters)
            result.total_exported += len(filters)

    if shared and not options.combine_shared:
        result.shared_file = render_storm_filters(
            shared, SHARED_CHANNEL_LABEL, options.equaliser_name, today
        )
        result.log.append(f"Shared Sub: {len(shared)} filters exported to {SHARED_FILE_NAME}")
        result.total_processed += len(shared)
        result.total_exported += len(shared)


def _summarize(result):
    result.log.append("Conversion complete!")
    result.log.append(f"Total filters processed: {result.total_processed}")
    result.log.append(f"Total filters exported: {result.total_exported}")
    if result.gains:
        result.log.append(f"Gain settings found for {len(result.gains)} channels")
    if result.delays:
        result.log.append(f"Delay settings found for {len(result.delays)} channels")
    if result.inversions.has_inversions:
        result.log.append(f"Channel inversions found: {', '.join(result.inversions.channels)}")
    else:
        result.log.append("No channel inversions found")


def _convert(text, options, result, today):
    parsed = run_stage(parse_report, text, options)
    if not parsed.ok:
        result.log.append(f"Error during conversion: {parsed.error}")
        return
    channels, shared = parsed.value

    levels = run_stage(extract_gain_and_delay, text)
    if levels.ok:
        result.gains, result.delays = levels.value
        result.log.extend(levels.log)
    else:
        result.log.append(f"Warning: Error parsing gain and delay settings: {levels.error}")

    inversions = run_stage(extract_inversions, text)
    if inversions.ok:
        result.inversions = inversions.value
        result.log.extend(inversions.log)
    else:
        result.inversions = ChannelInversionSet()
        result.log.append(f"Warning: Error parsing channel inversions: {inversions.error}")

    result.log.append(f"Using Q type: {options.q_mode.upper()}")
    if options.included_types:
        result.log.append(f"Included filter types: {', '.join(options.included_types)}")
    if options.combine_shared and shared:
        result.log.append(
            f"Combining {len(shared)} shared sub filters with individual channel filters"
        )
    result.log.append(LOG_RULE)

    written = run_stage(_write_channels, result, channels, shared, options, today)
    if not written.ok:
        result.log.append(f"Error during conversion: {written.error}")
        return

    result.log.append(LOG_RULE)
    _summarize(result)


def convert(report_text, options=None, today=None):
    """Convert MSO report text into StormAudio filter files.

    `today` fixes the date stamped into each file; defaults to the current date.
    """
    options = options or ConversionOptions()
    result = ConversionResult()
    try:
        _convert(report_text, options, result, today)
    except Exception as exc:
        result.log.append(f"Error during conversion: {exc}")
    return result


def build_preview(result):
    return ConversionPreview(
        channel_count=len(result.channel_files),
        has_shared_filters=bool(result.shared_file),
        total_filters=result.total_exported,
        messages=list(result.log),
        gain_count=len(result.gains),
        delay_count=len(result.delays),
        has_inversions=result.inversions.has_inversions,
        channel_names=result.channel_names(),
    )
