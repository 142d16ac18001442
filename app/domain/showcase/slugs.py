"""
Slug derivation for category names.

Lowercase, runs of anything that is not a-z or 0-9 collapse
into a single hyphen, and hyphens at either end are trimmed.
"""

import re

from app.domain.showcase.errors import ValidationError

_SEPARATOR_RUN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Return the URL slug for ``text``.

    Examples:
        >>> slugify("  Web & Mobile Apps ")
        'web-mobile-apps'
        >>> slugify("AI/ML")
        'ai-ml'

    An input with no ASCII letters or digits yields an empty string;
    callers decide whether that is acceptable.
    """
    return _SEPARATOR_RUN.sub("-", text.strip().lower()).strip("-")


def category_name_and_slug(name: str) -> tuple[str, str]:
    """Validate a category name and derive its slug.

    Returns:
        The trimmed name and its slug.

    Raises:
        ValidationError: If the name is blank or has no letters or digits.
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required")
    slug = slugify(cleaned)
    if not slug:
        raise ValidationError("Name must contain at least one letter or digit")
    return cleaned, slug
