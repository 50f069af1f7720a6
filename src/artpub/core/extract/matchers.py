"""Question/answer matchers for a detached FAQ region, tried in order"""

import html
import re
from typing import Protocol

from bs4 import NavigableString, Tag

from artpub.core.models import FaqPair
from artpub.core.utils.nodes import heading_level, node_text, normalize_whitespace


EMPHASIS_TAGS = ('strong', 'b', 'em', 'i')
PARAGRAPH_TAGS = ('p', 'li', 'div', 'dd', 'blockquote')
MEDIA_TAGS = ('img', 'picture', 'video', 'audio')
BLOCK_TAGS = (
    'p', 'div', 'section', 'article', 'header', 'footer', 'aside', 'nav', 'main',
    'blockquote', 'pre', 'figure', 'figcaption', 'hr',
    'ul', 'ol', 'li', 'dl', 'dt', 'dd',
    'table', 'thead', 'tbody', 'tfoot', 'tr', 'td', 'th',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
)

_LEADING_QUESTION_RE = re.compile(r'^\s*Q:\s*', re.IGNORECASE)
_QUESTION_MARK_RE = re.compile(r'\bQ:\s*', re.IGNORECASE)


class Matcher(Protocol):
    name: str

    def match(self, region: Tag) -> list[FaqPair]:
        ...


def _is_blank(node) -> bool:
    if isinstance(node, NavigableString):
        return not node.strip()
    return isinstance(node, Tag) and node.name == 'br'


def _trim_edges(block: Tag) -> None:
    """Drop whitespace strings and <br> tags at both ends of block."""
    while block.contents and _is_blank(block.contents[0]):
        block.contents[0].extract()
    while block.contents and _is_blank(block.contents[-1]):
        block.contents[-1].extract()


def inline_html(block: Tag) -> str:
    """Return block's inner markup with nested block-level wrappers unwrapped."""
    for inner in block.find_all(BLOCK_TAGS):
        inner.unwrap()
    _trim_edges(block)
    if not block.get_text(strip=True) and block.find(MEDIA_TAGS) is None:
        return ''
    return block.decode_contents().strip()


def _question_span(block: Tag) -> Tag | None:
    return block.find(lambda t: t.name in EMPHASIS_TAGS and _LEADING_QUESTION_RE.match(t.get_text()))


class EmphasisQuestionMatcher:
    """Paragraphs led by a bold/emphasized "Q:" span; the rest of the paragraph is the answer.

    When the paragraph holds nothing but the question, the next sibling element
    is taken as the answer instead.
    """
    name = 'emphasis'

    def match(self, region: Tag) -> list[FaqPair]:
        pairs: list[FaqPair] = []
        used: set[int] = set()

        for block in region.find_all(PARAGRAPH_TAGS):
            if id(block) in used:
                continue
            span = _question_span(block)
            # Only the nearest paragraph-like ancestor of the span owns the question.
            if span is None or span.find_parent(PARAGRAPH_TAGS) is not block:
                continue
            used.add(id(block))

            text = span.get_text()
            question = normalize_whitespace(_LEADING_QUESTION_RE.sub('', text, count=1))
            span.extract()
            answer = inline_html(block)

            if not answer:
                following = block.find_next_sibling()
                if following is not None and id(following) not in used and _question_span(following) is None:
                    used.add(id(following))
                    answer = inline_html(following)

            if question:
                pairs.append(FaqPair(question=question, answer_html=answer))
        return pairs


class HeadingQuestionMatcher:
    """h3 headings containing "Q:"; the next sibling's plain text is the answer."""
    name = 'heading'

    def match(self, region: Tag) -> list[FaqPair]:
        pairs: list[FaqPair] = []
        for heading in region.find_all('h3'):
            text = node_text(heading)
            m = _QUESTION_MARK_RE.search(text)
            if not m:
                continue
            question = text[m.end():].strip()
            if not question:
                continue
            following = heading.find_next_sibling()
            answer = ''
            if following is not None and heading_level(following) is None:
                answer = html.escape(node_text(following), quote=False)
            pairs.append(FaqPair(question=question, answer_html=answer))
        return pairs


DEFAULT_MATCHERS: tuple[Matcher, ...] = (EmphasisQuestionMatcher(), HeadingQuestionMatcher())
