"""Heading anchor assignment and table-of-contents construction"""

import logging

from artpub.core.models import TocEntry
from artpub.core.utils.nodes import HEADING_TAGS, find_faq_heading, heading_level, node_text
from artpub.core.utils.slug import slugify


logger = logging.getLogger(__name__)


def heading_id(position: int, text: str) -> str:
    """Return the anchor id for the heading at position with the given text."""
    slug = slugify(text)
    return f"heading-{position}-{slug}" if slug else f"heading-{position}"


def index_headings(tree, faq_heading=None) -> list[TocEntry]:
    """Assign anchor ids to h2/h3 headings in place and return their toc entries.

    Positions count every h2/h3 in document order. Indexing stops at the FAQ
    boundary heading: it and every heading after it belong to the FAQ region,
    which is cut from the content, so none of them gets an entry.
    """
    if faq_heading is None:
        faq_heading = find_faq_heading(tree)

    toc: list[TocEntry] = []
    for position, heading in enumerate(tree.find_all(HEADING_TAGS)):
        if heading is faq_heading:
            break
        text = node_text(heading)
        anchor = heading_id(position, text)
        heading['id'] = anchor
        toc.append(TocEntry(id=anchor, text=text, level=heading_level(heading)))

    logger.debug("Indexed %d heading(s)", len(toc))
    return toc
