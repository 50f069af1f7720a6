"""FAQ section detection, excision, and question/answer extraction"""

import logging

from bs4 import Tag

from artpub.core.extract.matchers import DEFAULT_MATCHERS
from artpub.core.models import FAQ_ANCHOR_ID, FaqExtraction
from artpub.core.utils.nodes import find_faq_heading


logger = logging.getLogger(__name__)


def _tail_nodes(heading: Tag) -> list:
    """Return heading and every node after it in document order, outermost last."""
    nodes = [heading, *heading.next_siblings]
    for ancestor in heading.parents:
        if ancestor.parent is None:     # the document root
            break
        nodes.extend(ancestor.next_siblings)
    return nodes


def detach_region(tree, heading: Tag) -> Tag:
    """Move the FAQ heading and everything after it into a detached container.

    Wrappers that enclose the heading stay in the main tree, minus the tail.
    """
    region = tree.new_tag('section')
    for node in _tail_nodes(heading):
        region.append(node.extract())
    return region


def extract_faq(tree, matchers=DEFAULT_MATCHERS, faq_heading=None) -> FaqExtraction:
    """Excise the FAQ region from tree and parse it into question/answer pairs.

    Matchers run in order; the first that yields any pair wins. The region is
    removed from the main tree whether or not anything matched.
    """
    heading = find_faq_heading(tree) if faq_heading is None else faq_heading
    if heading is None:
        return FaqExtraction()

    heading['id'] = FAQ_ANCHOR_ID
    region = detach_region(tree, heading)

    pairs = []
    for matcher in matchers:
        pairs = matcher.match(region)
        if pairs:
            logger.debug("FAQ matcher '%s' found %d pair(s)", matcher.name, len(pairs))
            break
    else:
        logger.warning("FAQ section has no recognizable question/answer pairs")

    return FaqExtraction(pairs=pairs, anchor_id=FAQ_ANCHOR_ID, heading=heading, region=region)
