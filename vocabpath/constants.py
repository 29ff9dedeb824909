"""Application-wide constants."""

from typing import Final

# Percentage a test attempt needs to pass and unlock the next section
TEST_PASS_THRESHOLD: Final[int] = 80

# Upper bound for a single answer's free text (fill-blank or matching JSON)
MAX_ANSWER_TEXT_LENGTH: Final[int] = 10_000

# Passed attempts within the window that mark an area as trending
HOT_AREA_MIN_COMPLETIONS: Final[int] = 3
HOT_AREA_WINDOW_DAYS: Final[int] = 7
