"""Day/night classification against a sunset time."""

from datetime import datetime, time

TIME_OF_DAY_FORMAT = "%I:%M %p"
MIDNIGHT = time(0, 0)


def is_night(observed_time: str, sunset_time: str, force_day: bool = False) -> bool:
    """True when observed_time is strictly later than sunset_time.

    Both values look like "07:45 PM" (meridiem in either case). A side that
    cannot be parsed counts as midnight, and a midnight on either side reads
    as day: an unparseable time and a real 12:00 AM are indistinguishable,
    so the classifier errs towards day art.
    """
    if force_day:
        return False

    observed = _parse_time_of_day(observed_time)
    sunset = _parse_time_of_day(sunset_time)
    if observed == MIDNIGHT or sunset == MIDNIGHT:
        return False
    return observed > sunset


def _parse_time_of_day(value: str) -> time:
    try:
        return datetime.strptime(value.strip(), TIME_OF_DAY_FORMAT).time()
    except (ValueError, TypeError, AttributeError):
        return MIDNIGHT
