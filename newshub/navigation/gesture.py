"""Hidden admin entry on the site logo.

Three clicks on the logo inside the burst window navigate to the admin route.
A click that is still alone once the quiet period has passed navigates home.
Two clicks followed by silence do nothing.

This only controls whether the admin entry point is reachable; the admin API
still requires a signed-in author.
"""

import asyncio
import logging
from collections.abc import Callable

from newshub.constants import (
    ADMIN_ROUTE,
    BURST_WINDOW_SECONDS,
    HOME_ROUTE,
    QUIET_PERIOD_SECONDS,
    TRIPLE_CLICK_COUNT,
)

logger = logging.getLogger(__name__)


class TripleClickDetector:
    """
    Per-session click state for the logo.

    Keeps the timestamps of recent clicks and at most one pending quiet-period
    timer. Must be disposed (or used as a context manager) when the owning
    session ends so no timer fires against a closed view.
    """

    def __init__(
        self,
        navigate: Callable[[str], object],
        *,
        window: float = BURST_WINDOW_SECONDS,
        quiet_period: float = QUIET_PERIOD_SECONDS,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self._navigate = navigate
        self.window = window
        self.quiet_period = quiet_period
        self._loop = loop
        self._clicks: list[float] = []
        self._timer: asyncio.TimerHandle | None = None
        self._disposed = False

    @property
    def clicks(self) -> tuple[float, ...]:
        return tuple(self._clicks)

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def click(self) -> None:
        """Register one logo click at the loop's current time."""
        if self._disposed:
            return

        loop = self._get_loop()
        now = loop.time()

        # Keep clicks in (now - window, now]
        self._clicks = [t for t in self._clicks if now - t < self.window]
        self._clicks.append(now)

        if len(self._clicks) >= TRIPLE_CLICK_COUNT:
            self._clicks = []
            self._cancel_timer()
            logger.info("Logo triple-click detected")
            self._navigate(ADMIN_ROUTE)
        elif len(self._clicks) == 1:
            self._cancel_timer()
            self._timer = loop.call_later(self.quiet_period, self._on_quiet_period)

    def _on_quiet_period(self) -> None:
        self._timer = None
        single = len(self._clicks) == 1
        # The burst is over whatever its length
        self._clicks = []
        if single:
            self._navigate(HOME_ROUTE)

    def dispose(self) -> None:
        """Cancel the pending timer and drop all state; later clicks are ignored."""
        self._cancel_timer()
        self._clicks = []
        self._disposed = True

    def __enter__(self) -> "TripleClickDetector":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()
