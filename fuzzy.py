"""
Fuzzy matching of search queries against repository names.
"""


def normalize(text):
    """Lower-case `text` and drop all whitespace."""
    return "".join(text.lower().split())


def fuzzy_match(query, target):
    """
    True when every character of `query` appears in `target` in the same order.

    Both sides are normalized first, so case and whitespace are ignored.
    An empty query matches anything.
    """
    remaining = iter(normalize(target))
    return all(char in remaining for char in normalize(query))


def matches(query, star):
    return fuzzy_match(query, star.full_name)
