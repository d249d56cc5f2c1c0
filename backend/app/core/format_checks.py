"""Format Checks - shared predicates used by both rule sets.

Invariants:
    - All functions are PURE: no IO (email checks never hit DNS)
    - Predicates return bool and never raise on bad input
    - None is treated as "nothing to check" by is_valid_email / is_valid_phone;
      guards in the rule sets decide whether empty strings are checked at all

Accepted email syntax:
    Whatever email-validator accepts without a deliverability lookup. Its
    special-use domains are rejected: addresses at .local, .test, .localhost,
    .invalid, .onion and .arpa fail even though they are syntactically
    local@domain.tld.

Accepted phone grammar:
    phone      := ["+"] body [extension]
    body       := (digit | " " | "-" | "." | "(" | ")")+     with 7-15 digits
    extension  := " "* ("ext." | "ext" | "x") " "* digit+
"""

import re
from datetime import date

from email_validator import EmailNotValidError, validate_email

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

_PHONE_RE = re.compile(
    r"^(?P<body>\+?[\d ().-]+?)"
    r"(?: *(?:ext\.?|x) *(?P<ext>\d+))?\Z",
    re.IGNORECASE | re.ASCII,
)
_WHITESPACE_RE = re.compile(r"\s")


def is_blank(value: str | None) -> bool:
    return value is None or value == ""


def is_empty(value: str | None) -> bool:
    """None, "" or whitespace only. Used for required names; email/phone guards use is_blank."""
    return value is None or not value.strip()


def subtract_years(day: date, years: int) -> date:
    """Same calendar day `years` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def is_valid_email(value: str | None) -> bool:
    """Syntactic local-part@domain check. Empty string is not an address."""
    if value is None:
        return True
    if not value or _WHITESPACE_RE.search(value):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: str | None) -> bool:
    if is_blank(value):
        return True
    match = _PHONE_RE.match(value)
    if match is None:
        return False
    digits = sum(ch.isdigit() for ch in match.group("body"))
    return PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS
