"""
Presence heuristic for conversations.
"""

from datetime import datetime, timedelta

from ...core.enums import PresenceStatus

ONLINE_WINDOW = timedelta(hours=2)
AWAY_WINDOW = timedelta(hours=24)


def presence(reference_time: datetime, now: datetime) -> PresenceStatus:
    """
    Presence from the time elapsed since the patient's latest booking activity.

    Under 2 hours is online, under 24 hours is away, anything older is
    offline. A reference time in the future counts as online.
    """
    elapsed = now - reference_time
    if elapsed < ONLINE_WINDOW:
        return PresenceStatus.ONLINE
    if elapsed < AWAY_WINDOW:
        return PresenceStatus.AWAY
    return PresenceStatus.OFFLINE
