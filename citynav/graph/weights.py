"""Effective edge weights under traffic conditions."""

from typing import Optional

from ..domain.models import TrafficStatus

# Largest factor a usable road can be scaled by
HEAVIEST_MULTIPLIER = max(
    status.multiplier for status in TrafficStatus if not status.is_blocked
)


def effective_weight(base: float, status: TrafficStatus) -> Optional[float]:
    """Return the cost of traversing a road under ``status``.

    Parameters
    ----------
    base:
        Base cost of the road with clear traffic (strictly positive).
    status:
        Current traffic status of the road.

    Returns
    -------
    float or None
        ``base`` scaled by the status multiplier (1.0, 1.8 or 3.5), or
        ``None`` when the road is blocked. ``None`` must be skipped by
        callers; it never takes part in a sum.
    """
    if status.is_blocked:
        return None
    return base * status.multiplier
