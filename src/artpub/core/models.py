"""Data models for the article transform pipeline"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Anchor target shared with the FAQ accordion renderer; must never change.
FAQ_ANCHOR_ID = "heading-faq"


class TocEntry(BaseModel):
    """A navigable table-of-contents entry pointing at a heading anchor."""
    id: str
    text: str
    level: int = Field(ge=2, le=3)      # heading depth (h2 or h3)


class FaqPair(BaseModel):
    """A question and its answer markup (inline tags only)."""
    model_config = ConfigDict(populate_by_name=True)

    question: str
    answer_html: str = Field(default="", alias="answerHtml")


class ContentDocument(BaseModel):
    """Public pipeline output: normalized article body, toc and extracted FAQ."""
    model_config = ConfigDict(populate_by_name=True)

    normalized_html: str = Field(alias="normalizedHtml")
    toc: list[TocEntry] = []
    faq: list[FaqPair] = []


@dataclass
class FaqExtraction:
    """Internal FAQ extraction result; the region is detached from the main tree."""
    pairs:     list[FaqPair] = field(default_factory=list)
    anchor_id: Optional[str] = None
    heading:   Optional[object] = None      # bs4 Tag of the FAQ heading
    region:    Optional[object] = None      # detached <section> holding heading + tail


@dataclass
class ArticleSource:
    """A raw article body read from disk, not persisted."""
    path: Path
    slug: str
    raw:  str
