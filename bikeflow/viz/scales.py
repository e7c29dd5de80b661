# bikeflow/viz/scales.py
import math

from bikeflow.traffic.window import NO_FILTER

UNFILTERED_RADIUS = (0.0, 25.0)
FILTERED_RADIUS = (3.0, 30.0)


def radius_scale(max_total, filtered):
    """
    Square-root scale from [0, max_total] trips onto a marker radius in px.

    A time filter shrinks the counts, so filtered maps get a minimum
    radius to keep quiet stations visible.
    """
    r0, r1 = FILTERED_RADIUS if filtered else UNFILTERED_RADIUS
    top = math.sqrt(max_total) if max_total > 0 else 0.0

    def scale(total):
        if top == 0:
            return r0
        return r0 + (r1 - r0) * math.sqrt(max(total, 0)) / top

    return scale


def format_time(minutes):
    """
    720 -> "12:00 PM", 5 -> "12:05 AM". NO_FILTER has no time.
    """
    if minutes == NO_FILTER:
        return ""
    hour, minute = divmod(int(minutes), 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"
