"""Shared BeautifulSoup node utilities"""

import re

from bs4 import Tag


HEADING_TAGS = ('h2', 'h3')
FAQ_TITLE = 'faq'

_WS_RE = re.compile(r'\s+')


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WS_RE.sub(' ', text).strip()


def node_text(tag: Tag) -> str:
    """Return the plain text content of tag, whitespace-normalized."""
    return normalize_whitespace(tag.get_text())


def heading_level(tag) -> int | None:
    """Return the heading level (1-6) for an h1-h6 tag, else None."""
    name = getattr(tag, 'name', None) or ''
    if len(name) == 2 and name[0] == 'h' and name[1] in '123456':
        return int(name[1])
    return None


def is_faq_title(tag: Tag) -> bool:
    """True if the tag's trimmed text is exactly 'FAQ' (any case)."""
    return node_text(tag).lower() == FAQ_TITLE


def find_faq_heading(tree) -> Tag | None:
    """Return the first h2 titled 'FAQ', the FAQ boundary heading, else None."""
    return tree.find(lambda t: t.name == 'h2' and is_faq_title(t))
