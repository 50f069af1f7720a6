"""Shared fixtures for core unit tests"""

import pytest

from artpub.core.parse import MarkupAdapter


SAMPLE_HTML = """\
<h2>Getting Started</h2>
<p>Install the <em>client</em> first.</p>
<h3>Requirements</h3>
<ul><li>Python</li><li>pip</li></ul>
<h2>Usage</h2>
<p>Run it.</p>
<h2>FAQ</h2>
<p><strong>Q: Is it free?</strong> Yes, <a href="/pricing">always</a>.</p>
<p><strong>Q: Does it scale?</strong></p>
<p>It does.</p>
"""


@pytest.fixture(name="adapter")
def adapter_fixture():
    return MarkupAdapter()


@pytest.fixture(name="sample_tree")
def sample_tree_fixture(adapter):
    return adapter.parse(SAMPLE_HTML)
