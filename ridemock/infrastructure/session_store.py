"""
In-memory ride session store.

Holds one ``RideSession`` per booking id for the lifetime of the app
instance.  The most recently booked ride is the *current* session; status
polls without a booking id go there, which is what the demo front end does.

Polls for ids that were never booked still get a ride, but those rides live
in a small LRU cache (``max_unbooked_sessions``) instead of the booking map.

No locking: handlers run on a single event loop and never await between
reading and mutating a session.
"""

from __future__ import annotations

import logging
import random
import time
from collections import OrderedDict
from typing import Optional

from ridemock.config import Settings
from ridemock.domain.entities import Driver, Location, RideSession
from ridemock.domain.policies import build_policy

logger = logging.getLogger(__name__)


class RideSessionStore:
    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng
        self._sessions: dict[str, RideSession] = {}
        self._unbooked: OrderedDict[str, RideSession] = OrderedDict()
        self._last_ms = 0
        # Process-start ride so status polling works before any booking
        self._current = self._new_session(None)

    def _new_session(
        self,
        booking_id: Optional[str],
        driver: Optional[Driver] = None,
        otp: Optional[str] = None,
    ) -> RideSession:
        return RideSession(
            booking_id=booking_id,
            policy=build_policy(self.settings, self.rng),
            location=Location(self.settings.mock_lat, self.settings.mock_lng),
            driver=driver,
            otp=otp,
        )

    @property
    def current(self) -> RideSession:
        return self._current

    @property
    def unbooked_count(self) -> int:
        return len(self._unbooked)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, booking_id: str) -> bool:
        return booking_id in self._sessions

    def new_booking_id(self) -> str:
        """``book_<epoch ms>``, bumped by 1ms if two bookings share a millisecond."""
        self._last_ms = max(int(time.time() * 1000), self._last_ms + 1)
        return f"book_{self._last_ms}"

    def create(
        self,
        booking_id: str,
        driver: Optional[Driver] = None,
        otp: Optional[str] = None,
    ) -> RideSession:
        """Register a freshly booked ride and make it the current one."""
        session = self._new_session(booking_id, driver, otp)
        self._sessions[booking_id] = session
        self._unbooked.pop(booking_id, None)
        self._current = session
        logger.info(
            "Ride %s booked (policy=%s)", booking_id, self.settings.status_policy.value
        )
        return session

    def get_or_create(self, booking_id: Optional[str] = None) -> RideSession:
        """Look up a ride; unknown ids get a cached ride that never becomes current."""
        if booking_id is None:
            return self._current
        session = self._sessions.get(booking_id)
        if session is not None:
            return session

        session = self._unbooked.get(booking_id)
        if session is not None:
            self._unbooked.move_to_end(booking_id)
            return session

        logger.info("Ride %s not booked here; starting a new session", booking_id)
        session = self._new_session(booking_id)
        self._unbooked[booking_id] = session
        while len(self._unbooked) > self.settings.max_unbooked_sessions:
            evicted, _ = self._unbooked.popitem(last=False)
            logger.debug("Evicted unbooked ride %s", evicted)
        return session

    def reset(self, booking_id: Optional[str] = None) -> RideSession:
        session = self.get_or_create(booking_id)
        session.reset()
        logger.info("Ride %s reset to %s", session.booking_id, session.status.value)
        return session
