"""CNB daily feed layout."""

import re

# "03 Jan 2000 #1" or "03.Jan.2000 #1"
HEADER_PATTERN = re.compile(r"^(\d{1,2}[\s.]?\w{3}[\s.]?\d{4})\s*#(\d+)$", re.IGNORECASE)

# Tried in order; %d also accepts a single-digit day.
DATE_FORMATS = ("%d %b %Y", "%d.%b.%Y")

FIELD_SEPARATOR = "|"
FEED_COLUMNS = ["Country", "Currency", "Amount", "Code", "Rate"]
COLUMN_HEADER_LINE = FIELD_SEPARATOR.join(FEED_COLUMNS)

AMOUNT_PATTERN = re.compile(r"^[+-]?\d+$")
# Amounts and sequence numbers are 32-bit signed integers in the published feed.
MAX_INT = 2**31 - 1
# Locale-independent: "." is the only decimal point, no grouping, no exponent.
RATE_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

CODE_LENGTH = 3
