"""Pipeline facade: raw article markup in, ContentDocument out; plus batch orchestration"""

import html
import logging
from pathlib import Path

from artpub.core.export import assemble, write_doc
from artpub.core.extract.faq import extract_faq
from artpub.core.extract.headings import index_headings
from artpub.core.models import ArticleSource, ContentDocument, TocEntry
from artpub.core.parse import MarkupAdapter, discover_files, read_article
from artpub.core.utils.nodes import find_faq_heading


logger = logging.getLogger(__name__)


def _fallback_html(raw) -> str:
    """Escaped plain rendering of raw input, used when the markup pipeline fails."""
    if raw is None:
        return ''
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8', errors='replace')
    return html.escape(str(raw))


def _transform(raw, adapter: MarkupAdapter) -> ContentDocument:
    tree = adapter.parse(raw)
    faq_heading = find_faq_heading(tree)
    toc = index_headings(tree, faq_heading)
    faq = extract_faq(tree, faq_heading=faq_heading)
    if faq.anchor_id:
        toc.append(TocEntry(id=faq.anchor_id, text="FAQ", level=2))
    return ContentDocument(normalized_html=assemble(tree, adapter), toc=toc, faq=faq.pairs)


def transform(raw, adapter: MarkupAdapter = None) -> ContentDocument:
    """Parse, index headings, extract the FAQ, and reassemble one article body.

    Pure: every call builds its own tree. Author content never makes this raise;
    an unexpected failure degrades to the escaped input with no toc or faq.
    """
    adapter = adapter or MarkupAdapter()
    try:
        return _transform(raw, adapter)
    except Exception:
        logger.exception("Article transform failed; rendering escaped text instead")
        return ContentDocument(normalized_html=_fallback_html(raw))


def load_document(
    path: Path,
    adapter: MarkupAdapter = None,
    content_field: str = 'content',
    ) -> tuple[ArticleSource, ContentDocument]:
    """Read one article file and transform it. Raises ValueError/OSError on unreadable input."""
    article = read_article(path, content_field)
    return article, transform(article.raw, adapter)


def run_transform(
    path: str,
    output_dir: Path,
    adapter: MarkupAdapter = None,
    content_field: str = 'content',
    indent: int = 2,
    ) -> list[tuple[Path, Path]]:
    """Transform every article under path and write outputs. Returns (source_path, html_path) pairs."""
    adapter = adapter or MarkupAdapter()
    results = []
    for p in discover_files(Path(path)):
        try:
            article, doc = load_document(p, adapter, content_field)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to read {p}: {e}") from e
        html_path, _ = write_doc(doc, article.slug, output_dir, indent)
        logger.info("%s -> %s (%d toc, %d faq)", p, html_path, len(doc.toc), len(doc.faq))
        results.append((p, html_path))
    return results
