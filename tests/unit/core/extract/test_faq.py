"""Unit tests for core/extract/faq.py"""

import logging

from artpub.core.extract.faq import detach_region, extract_faq
from artpub.core.extract.matchers import HeadingQuestionMatcher
from artpub.core.models import FAQ_ANCHOR_ID, FaqExtraction


def test_no_faq_heading(adapter):
    """Without an h2 FAQ heading the tree is untouched and nothing is extracted."""
    raw = "<h2>Intro</h2><p><strong>Q: Orphan?</strong> yes</p>"
    tree = adapter.parse(raw)
    result = extract_faq(tree)
    assert result == FaqExtraction()
    assert result.anchor_id is None
    assert adapter.serialize(tree) == raw


def test_h3_faq_is_not_a_boundary(adapter):
    """Only an h2 titled FAQ starts the FAQ region."""
    tree = adapter.parse("<h3>FAQ</h3><p><strong>Q: x?</strong> y</p>")
    assert extract_faq(tree).anchor_id is None


def test_faq_region_excised(adapter, sample_tree):
    """The FAQ heading and everything after it leave the main tree."""
    result = extract_faq(sample_tree)
    html = adapter.serialize(sample_tree)
    assert result.anchor_id == FAQ_ANCHOR_ID
    assert "FAQ" not in html
    assert "Is it free" not in html
    assert "It does." not in html
    assert html.rstrip().endswith("<p>Run it.</p>")


def test_faq_pairs_extracted(sample_tree):
    """Emphasis questions in the sample yield ordered pairs."""
    result = extract_faq(sample_tree)
    assert [(p.question, p.answer_html) for p in result.pairs] == [
        ("Is it free?", 'Yes, <a href="/pricing">always</a>.'),
        ("Does it scale?", "It does."),
    ]


def test_faq_heading_detached_with_anchor(sample_tree):
    """The detached heading carries the reserved anchor and leads the region."""
    result = extract_faq(sample_tree)
    assert result.heading["id"] == FAQ_ANCHOR_ID
    assert result.region.contents[0] is result.heading
    assert result.heading.parent is result.region


def test_fallback_to_heading_matcher(adapter):
    """h3 Q: headings are used when no emphasized questions exist."""
    tree = adapter.parse("<p>Body</p><h2>FAQ</h2><h3>Q: Refunds?</h3><p>Within 30 days.</p>")
    result = extract_faq(tree)
    assert [(p.question, p.answer_html) for p in result.pairs] == [("Refunds?", "Within 30 days.")]
    assert adapter.serialize(tree) == "<p>Body</p>"


def test_emphasis_wins_over_heading_matcher(adapter):
    """When emphasis matching finds pairs, heading questions are ignored."""
    tree = adapter.parse(
        "<h2>FAQ</h2><h3>Q: Heading?</h3><p>h</p><p><strong>Q: Bold?</strong> b</p>"
    )
    assert [p.question for p in extract_faq(tree).pairs] == ["Bold?"]


def test_no_recognizable_pairs_still_excised(adapter, caplog):
    """A FAQ region without patterns yields no pairs but is removed and logged."""
    tree = adapter.parse("<p>Lead</p><h2>FAQ</h2><p>Contact us.</p>")
    with caplog.at_level(logging.WARNING, logger="artpub.core.extract.faq"):
        result = extract_faq(tree)
    assert result.pairs == []
    assert result.anchor_id == FAQ_ANCHOR_ID
    assert adapter.serialize(tree) == "<p>Lead</p>"
    assert "no recognizable" in caplog.text


def test_custom_matchers(adapter):
    """Callers can restrict the matcher list."""
    tree = adapter.parse("<h2>FAQ</h2><p><strong>Q: Bold?</strong> b</p>")
    assert extract_faq(tree, matchers=(HeadingQuestionMatcher(),)).pairs == []


def test_nested_faq_heading_takes_outer_tail(adapter):
    """A FAQ heading inside a wrapper also takes the content after the wrapper."""
    tree = adapter.parse(
        '<div class="article"><h2>Intro</h2><p>a</p><h2>FAQ</h2>'
        '<p><b>Q: One?</b> Yes.</p></div><p>tail</p>'
    )
    result = extract_faq(tree)
    assert adapter.serialize(tree) == '<div class="article"><h2>Intro</h2><p>a</p></div>'
    assert [p.question for p in result.pairs] == ["One?"]
    assert "tail" in result.region.get_text()


def test_first_faq_heading_is_boundary(adapter):
    """With two FAQ headings the first one bounds the region."""
    tree = adapter.parse("<p>x</p><h2>FAQ</h2><p>y</p><h2>FAQ</h2><p>z</p>")
    result = extract_faq(tree)
    assert adapter.serialize(tree) == "<p>x</p>"
    assert len(result.region.find_all("h2")) == 2


def test_detach_region_keeps_order(adapter):
    """detach_region moves nodes into the container in document order."""
    tree = adapter.parse("<div><h2>FAQ</h2><p>1</p></div><p>2</p><p>3</p>")
    region = detach_region(tree, tree.h2)
    assert region.name == "section"
    assert region.get_text() == "FAQ123"
    assert adapter.serialize(tree) == "<div></div>"
