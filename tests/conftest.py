"""Test setup for docinspect."""

from __future__ import annotations

import pytest

from docinspect.models import Document
from docinspect.validators import CollectingSink
from helpers import make_document, make_paragraph, make_section


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def nested_document() -> Document:
    """Two top-level sections; the first has one nested subsection."""
    return make_document(
        make_section(
            "A",
            [make_paragraph("a1", "a2", line=1)],
            [make_section("A.1", [make_paragraph("a11", line=3)], level=2)],
        ),
        make_section("B", [make_paragraph("b1", line=4)]),
    )


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "expressions.tsv"
    path.write_text("teh\tthe\nadn\tand\n", encoding="utf-8")
    return path
