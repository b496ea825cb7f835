"""StormAudio filter settings exporter."""

from datetime import date

from mso2storm.core.filters import classify


TITLE = "Filter Settings file"


def render_storm_filters(entries, channel_label, equaliser_name, today=None):
    today = today or date.today()
    lines = [
        TITLE,
        "",
        f"Dated:{today:%Y%m%d}",
        "",
        f"Equaliser: {equaliser_name}",
    ]
    if channel_label:
        lines.append(f"Channel: {channel_label}")
    lines.append("")

    index = 1
    for entry in entries:
        # numbering skips anything the registry cannot render
        kind = classify(entry.type_label)
        if kind is None:
            continue
        lines.append(kind.render(entry, index))
        index += 1

    return "\n".join(lines) + "\n"
