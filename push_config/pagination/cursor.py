"""Page cursor and page token codec.

A page token is ``"<epoch_millis>:<config_id>"``: the creation time of the
last config on the previous page (epoch milliseconds, ``0`` for a config
without a creation time) and that config's id. Everything after the first
colon belongs to the id, so ids may contain colons.
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import total_ordering

from push_config.constants import NULL_TIMESTAMP_SENTINEL, PAGE_TOKEN_SEPARATOR
from push_config.exceptions import InvalidParamsError

_ONE_MILLISECOND = timedelta(milliseconds=1)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_MILLIS_PATTERN = re.compile(r"[+-]?\d+")


def current_timestamp() -> datetime:
    """Return the current UTC time truncated to whole milliseconds.

    Page tokens carry epoch milliseconds, so stored creation times must not
    be finer than that for cursor comparisons to be exact.
    """
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


@total_ordering
@dataclass(frozen=True)
class LogicalTimestamp:
    """A creation time that is either a concrete instant or the sentinel.

    ``instant=None`` is the sentinel. It compares as the Unix epoch, so it is
    ordered before every real creation time and ends up last in a
    newest-first listing.
    """

    instant: datetime | None = None

    @classmethod
    def sentinel(cls) -> "LogicalTimestamp":
        return cls(None)

    @classmethod
    def of(cls, value: "datetime | LogicalTimestamp | None") -> "LogicalTimestamp":
        """Wrap a datetime (or None) as a logical timestamp."""
        if isinstance(value, LogicalTimestamp):
            return value
        if value is None or value == NULL_TIMESTAMP_SENTINEL:
            return cls.sentinel()
        return cls(value)

    @classmethod
    def from_epoch_millis(cls, millis: int) -> "LogicalTimestamp":
        return cls.of(NULL_TIMESTAMP_SENTINEL + millis * _ONE_MILLISECOND)

    @property
    def is_sentinel(self) -> bool:
        return self.instant is None

    def to_datetime(self) -> datetime:
        """Instant used in queries; the sentinel materialises as the epoch."""
        if self.instant is None:
            return NULL_TIMESTAMP_SENTINEL
        return self.instant

    def to_epoch_millis(self) -> int:
        return (self.to_datetime() - NULL_TIMESTAMP_SENTINEL) // _ONE_MILLISECOND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogicalTimestamp):
            return NotImplemented
        return self.to_datetime() == other.to_datetime()

    def __lt__(self, other: "LogicalTimestamp") -> bool:
        if not isinstance(other, LogicalTimestamp):
            return NotImplemented
        return self.to_datetime() < other.to_datetime()

    def __hash__(self) -> int:
        return hash(self.to_datetime())


@dataclass(frozen=True)
class PageCursor:
    """Position after which the next page starts."""

    timestamp: LogicalTimestamp
    id: str


def encode_page_token(
    timestamp: "LogicalTimestamp | datetime | None", config_id: str
) -> str:
    """Encode the last row of a page as a page token. Never fails."""
    millis = LogicalTimestamp.of(timestamp).to_epoch_millis()
    return f"{millis}{PAGE_TOKEN_SEPARATOR}{config_id}"


def decode_page_token(token: str | None) -> PageCursor | None:
    """Decode a page token into a cursor.

    Returns None for an empty or missing token (first page).

    Raises:
        InvalidParamsError: If the token has no separator or its timestamp
            part is not an integer number of milliseconds.
    """
    if not token:
        return None

    millis_part, separator, config_id = token.partition(PAGE_TOKEN_SEPARATOR)
    if not separator:
        raise InvalidParamsError(
            "Invalid pageToken format: pageToken must be in "
            "'timestamp_millis:configId' format"
        )

    if not _MILLIS_PATTERN.fullmatch(millis_part):
        raise InvalidParamsError(
            "Invalid pageToken format: timestamp must be numeric milliseconds"
        )
    millis = int(millis_part)
    if not _INT64_MIN <= millis <= _INT64_MAX:
        raise InvalidParamsError(
            "Invalid pageToken format: timestamp must be numeric milliseconds"
        )

    try:
        timestamp = LogicalTimestamp.from_epoch_millis(millis)
    except OverflowError as e:
        raise InvalidParamsError(
            "Invalid pageToken format: timestamp is out of range"
        ) from e
    return PageCursor(timestamp=timestamp, id=config_id)
