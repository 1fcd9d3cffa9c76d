"""
Apple Podcasts category taxonomy.

Holds the two-level category list published by Apple and groups flat
category lists (as found in configuration files) into top-level categories
with their sub-categories.

The table is built once at import time and exposed read-only, so it can be
shared between threads without locking.

Example:
    >>> parse_categories(["Arts", "Books", "Sports"])
    {'Arts': ['Books'], 'Sports': []}
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple


CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Arts": (
        "Books", "Design", "Fashion & Beauty", "Food", "Performing Arts",
        "Visual Arts",
    ),
    "Business": (
        "Careers", "Entrepreneurship", "Investing", "Management",
        "Marketing", "Non-Profit",
    ),
    "Comedy": ("Comedy Interviews", "Improv", "Stand-Up"),
    "Education": (
        "Courses", "How To", "Language Learning", "Self-Improvement",
    ),
    "Fiction": ("Comedy Fiction", "Drama", "Science Fiction"),
    "Government": (),
    "History": (),
    "Health & Fitness": (
        "Alternative Health", "Fitness", "Medicine", "Mental Health",
        "Nutrition", "Sexuality",
    ),
    "Kids & Family": (
        "Education for Kids", "Parenting", "Pets & Animals",
        "Stories for Kids",
    ),
    "Leisure": (
        "Animation & Manga", "Automotive", "Aviation", "Crafts", "Games",
        "Hobbies", "Home & Garden", "Video Games",
    ),
    "Music": ("Music Commentary", "Music History", "Music Interviews"),
    "News": (
        "Business News", "Daily News", "Entertainment News",
        "News Commentary", "Politics", "Sports News", "Tech News",
    ),
    "Religion & Spirituality": (
        "Buddhism", "Christianity", "Hinduism", "Islam", "Judaism",
        "Religion", "Spirituality",
    ),
    "Science": (
        "Astronomy", "Chemistry", "Earth Sciences", "Life Sciences",
        "Mathematics", "Natural Sciences", "Nature", "Physics",
        "Social Sciences",
    ),
    "Society & Culture": (
        "Documentary", "Personal Journals", "Philosophy",
        "Places & Travel", "Relationships",
    ),
    "Sports": (
        "Baseball", "Basketball", "Cricket", "Fantasy Sports", "Football",
        "Golf", "Hockey", "Rugby", "Running", "Soccer", "Swimming",
        "Tennis", "Volleyball", "Wilderness", "Wrestling",
    ),
    "Technology": (),
    "True Crime": (),
    "TV & Film": (
        "After Shows", "Film History", "Film Interviews", "Film Reviews",
        "TV Reviews",
    ),
})


def is_top_level(name: str) -> bool:
    """Return True if name is a top-level Apple Podcasts category."""
    return name in CATEGORIES


def sub_categories(name: str) -> Tuple[str, ...]:
    """
    Return the allowed sub-categories of a top-level category.

    Raises:
        KeyError: If name is not a top-level category
    """
    return CATEGORIES[name]


def parse_categories(flat: Iterable[str]) -> Dict[str, List[str]]:
    """
    Group a flat list of category names by top-level category.

    Each top-level name starts a group; every following name joins that
    group until the next top-level name. Names seen before the first
    top-level name have no group and are dropped.

    Args:
        flat: Category names in document order

    Returns:
        Mapping of top-level category to its sub-categories in input order

    Example:
        >>> parse_categories([
        ...     "Religion & Spirituality", "Christianity", "Buddhism",
        ... ])
        {'Religion & Spirituality': ['Christianity', 'Buddhism']}
    """
    grouped: Dict[str, List[str]] = {}
    current = None

    for name in flat:
        if name in CATEGORIES:
            current = name
            grouped.setdefault(current, [])
        elif current is not None:
            grouped[current].append(name)

    return grouped


def validate_category(category: str, subs: Iterable[str] = ()) -> List[str]:
    """
    Check a category and its sub-categories against the taxonomy.

    Args:
        category: Top-level category name
        subs: Sub-category names to check under category

    Returns:
        Names that are not part of the taxonomy (empty when all are valid)
    """
    if category not in CATEGORIES:
        return [category] + [s for s in subs if s]

    allowed = CATEGORIES[category]
    return [s for s in subs if s and s not in allowed]
