"""Content limits and gesture timings."""

# Articles
TITLE_MAX_LENGTH = 200
EXCERPT_MAX_CHARS = 200
WORDS_PER_MINUTE = 200

# Logo gesture: clicks counted over the burst window, single click settles after the quiet period
TRIPLE_CLICK_COUNT = 3
BURST_WINDOW_SECONDS = 2.0
QUIET_PERIOD_SECONDS = 0.5
