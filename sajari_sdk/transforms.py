"""Server-defined transforms applied to requests and records."""

from enum import Enum


class Transform(str, Enum):
    """A named transformation run by the service before a request executes.

    Transforms are most commonly used when adding records.
    """

    # Splits indexed fields into terms, removes stop words and stems the rest.
    SPLIT_STOP_STEM_INDEXED_FIELDS = "split-stop-stem-indexed-fields"

    # Removes stop terms and stems terms.
    STOP_STEM = "stop-stem"

    # Splits indexed fields into terms.
    SPLIT_INDEXED_FIELDS = "split-indexed-fields"
