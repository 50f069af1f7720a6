"""Article discovery, markup parsing, sanitization, and serialization"""

import json
import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup, Comment
from bs4.builder import builder_registry

from artpub.core.models import ArticleSource
from artpub.core.utils.nodes import HEADING_TAGS
from artpub.core.utils.slug import slugify


logger = logging.getLogger(__name__)

ARTICLE_EXTENSIONS = {'.html', '.htm', '.json'}
DEFAULT_PARSER = 'html.parser'
DEFAULT_UNSAFE_TAGS = (
    'script', 'style', 'noscript', 'iframe', 'frame', 'frameset', 'object', 'embed', 'template',
    'base', 'meta',
    # SVG animation elements set attributes at runtime
    'animate', 'set', 'animatetransform', 'animatemotion',
)
URL_ATTRIBUTES = {'href', 'src', 'action', 'formaction', 'xlink:href', 'values', 'to', 'from', 'by'}

_SCRIPT_URL_RE = re.compile(r'^(javascript|vbscript):', re.IGNORECASE)
_URL_NOISE_RE = re.compile(r'[\x00-\x20]+')
_RESERVED_ID_RE = re.compile(r'^heading-(?:faq$|\d+(?:-|$))')


def _is_script_url(value) -> bool:
    """True if an attribute value uses a script-executing URL scheme."""
    if isinstance(value, list):
        value = ' '.join(value)
    cleaned = _URL_NOISE_RE.sub('', str(value))
    # animation 'values' hold a ';'-separated list
    return any(_SCRIPT_URL_RE.match(part) for part in cleaned.split(';'))


class MarkupAdapter:
    """Parse untrusted article markup into a sanitized, mutable tree and back.

    Each call to parse() builds an isolated tree; the adapter itself holds only
    configuration, so one instance can serve concurrent invocations.
    """

    def __init__(self, parser: str = DEFAULT_PARSER, unsafe_tags=DEFAULT_UNSAFE_TAGS):
        if builder_registry.lookup(parser) is None:
            raise ValueError(f"Markup parser '{parser}' is not installed")
        self.parser = parser
        self.unsafe_tags = tuple(t.lower() for t in unsafe_tags)

    @classmethod
    def from_settings(cls, settings) -> 'MarkupAdapter':
        return cls(parser=settings.parser, unsafe_tags=settings.unsafe_tags)

    def parse(self, raw) -> BeautifulSoup:
        """Parse raw markup (str, UTF-8 bytes, or None) and strip executable content."""
        if raw is None:
            raw = ''
        elif isinstance(raw, bytes):
            raw = raw.decode('utf-8', errors='replace')
        tree = BeautifulSoup(raw, self.parser)
        self.sanitize(tree)
        return tree

    def sanitize(self, tree: BeautifulSoup) -> None:
        """Remove unsafe elements, comments, event handlers and script URLs in place.

        Author ids in the reserved heading-anchor namespace are dropped as well.
        """
        removed = 0
        if self.unsafe_tags:
            for tag in tree.find_all(self.unsafe_tags):
                if not tag.decomposed:
                    tag.decompose()
                    removed += 1
        for comment in tree.find_all(string=lambda s: isinstance(s, Comment)):
            comment.extract()
        for tag in tree.find_all(True):
            for name in list(tag.attrs):
                key = name.lower()
                if key.startswith('on') or (key in URL_ATTRIBUTES and _is_script_url(tag.attrs[name])):
                    del tag.attrs[name]
                    removed += 1
                elif (key == 'id' and tag.name not in HEADING_TAGS
                      and _RESERVED_ID_RE.match(str(tag.attrs[name]))):
                    # anchors in this namespace belong to h2/h3 headings only
                    del tag.attrs[name]
        if removed:
            logger.debug("Sanitizer removed %d unsafe element(s)/attribute(s)", removed)

    def serialize(self, tree) -> str:
        """Return markup for tree; document wrappers added by full-document parsers are dropped."""
        if self.parser != DEFAULT_PARSER and getattr(tree, 'body', None) is not None:
            return tree.body.decode_contents()
        return tree.decode()


def discover_files(path: Path) -> list[Path]:
    """Return sorted .html/.htm/.json files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in ARTICLE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in ARTICLE_EXTENSIONS)


def read_article(path: Path, content_field: str = 'content') -> ArticleSource:
    """Read an article body from an HTML file or an article JSON payload.

    JSON payloads are objects as served by the article detail endpoint; the markup
    lives in content_field and the slug comes from 'slug', then 'title', then the
    file name.
    """
    text = path.read_text(encoding='utf-8', errors='replace')
    if path.suffix.lower() != '.json':
        return ArticleSource(path=path, slug=slugify(path.stem) or 'article', raw=text)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid article JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid article JSON: expected an object, got {type(payload).__name__}")
    raw = payload.get(content_field)
    if not isinstance(raw, str):
        raise ValueError(f"Article JSON has no string '{content_field}' field")
    slug = slugify(str(payload.get('slug') or payload.get('title') or path.stem)) or 'article'
    return ArticleSource(path=path, slug=slug, raw=raw)
