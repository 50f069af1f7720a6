"""Content assembly and output writing: normalized HTML plus sidecar JSON"""

import json
from pathlib import Path

from artpub.core.models import ContentDocument
from artpub.core.parse import MarkupAdapter


def assemble(tree, adapter: MarkupAdapter = None) -> str:
    """Serialize the main-region tree (FAQ region already detached) to markup."""
    return (adapter or MarkupAdapter()).serialize(tree)


def build_sidecar(doc: ContentDocument, slug: str) -> dict:
    """Build the sidecar JSON dict: slug, toc and faq with camelCase keys."""
    data = doc.model_dump(by_alias=True, include={'toc', 'faq'})
    return {"slug": slug, **data}


def write_doc(
    doc: ContentDocument,
    slug: str,
    output_dir: Path,
    indent: int = 2,
    ) -> tuple[Path, Path]:
    """Write <slug>.html and <slug>.json for a single article.

    Returns (html_path, json_path).
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_dir / f"{slug}.html"
    json_path = output_dir / f"{slug}.json"

    html_path.write_text(doc.normalized_html, encoding='utf-8')
    json_path.write_text(
        json.dumps(build_sidecar(doc, slug), indent=indent or None, ensure_ascii=False),
        encoding='utf-8',
    )
    return html_path, json_path
