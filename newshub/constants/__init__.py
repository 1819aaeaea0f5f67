"""Fixed product constants shared across the application."""

from newshub.constants.limits import (
    BURST_WINDOW_SECONDS,
    EXCERPT_MAX_CHARS,
    QUIET_PERIOD_SECONDS,
    TITLE_MAX_LENGTH,
    TRIPLE_CLICK_COUNT,
    WORDS_PER_MINUTE,
)
from newshub.constants.routes import (
    ADMIN_ROUTE,
    ARTICLE_ROUTE,
    HOME_ROUTE,
)

__all__ = [
    "ADMIN_ROUTE",
    "ARTICLE_ROUTE",
    "BURST_WINDOW_SECONDS",
    "EXCERPT_MAX_CHARS",
    "HOME_ROUTE",
    "QUIET_PERIOD_SECONDS",
    "TITLE_MAX_LENGTH",
    "TRIPLE_CLICK_COUNT",
    "WORDS_PER_MINUTE",
]
