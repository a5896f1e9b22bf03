from datetime import datetime, timezone
from time import time as time_sec


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_iso8601(timestamp: float | None = None) -> str:
    """
    Render a Unix timestamp as an ISO 8601 UTC string with millisecond precision.

    Parameters
    ----------
    timestamp : float, optional
        Seconds since the epoch. Defaults to the current time.

    Returns
    -------
    str
        The timestamp formatted as 'YYYY-MM-DDTHH:MM:SS.mmmZ'.

    Example
    -------
    >>> time_iso8601(1680569330.516)
    '2023-04-04T00:48:50.516Z'
    """
    if timestamp is None:
        timestamp = time_sec()
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
