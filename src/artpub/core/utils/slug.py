"""Slug generation for heading anchor identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Convert text to a lowercase slug: runs of non-alphanumerics become one hyphen."""
    return _NON_ALNUM_RE.sub('-', text.lower()).strip('-')
