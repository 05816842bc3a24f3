"""
Ordering of the fetched star list.
"""

from enum import Enum

from config import logger


class SortOrder(Enum):
    ADDED_AT = "added-at"
    AUTHOR_NAME = "author-name"
    CREATED_AT = "created-at"
    UPDATED_AT = "updated-at"
    REPOSITORY_NAME = "repository-name"

    @classmethod
    def parse(cls, value):
        """Map a user-supplied key to a SortOrder. Unknown keys fall back to ADDED_AT."""
        if not value:
            return cls.ADDED_AT
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown order '{value}', keeping the order stars were added in")
            return cls.ADDED_AT


# key function and descending flag per order; ADDED_AT keeps fetch order
_SORT_KEYS = {
    SortOrder.AUTHOR_NAME: (lambda s: s.owner.lower(), False),
    SortOrder.CREATED_AT: (lambda s: s.created_at, True),
    SortOrder.UPDATED_AT: (lambda s: s.updated_at, True),
    SortOrder.REPOSITORY_NAME: (lambda s: s.name.lower(), False),
}


def sort_stars(stars, order=SortOrder.ADDED_AT, reverse=False):
    """
    Return a new list of stars ordered by `order`.

    Sorting is stable, so records with equal keys keep their fetch order.
    `reverse` flips the final list end to end.
    """
    if not isinstance(order, SortOrder):
        order = SortOrder.parse(order)

    result = list(stars)
    if order in _SORT_KEYS:
        key, descending = _SORT_KEYS[order]
        result.sort(key=key, reverse=descending)

    if reverse:
        result.reverse()
    return result
