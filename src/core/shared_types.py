"""
Type definitions used across layers
"""

from enum import StrEnum


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


# Fields a page of ratings may be ordered by (as named in the API)
SORTABLE_FIELDS = ("id", "score", "comment", "rated_at", "game_id")
