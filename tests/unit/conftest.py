"""Shared test fixtures."""

from pathlib import Path

import pytest

from preview_search.models.tree import DocNode
from tests.unit.docs import SAMPLE_MARKDOWN, document, paragraph
from tests.unit.fakes import FakePresentation


@pytest.fixture
def hello_doc() -> DocNode:
    """Two text nodes: "Hello world" and "world peace"."""
    return document(
        paragraph("Hello world"),
        DocNode(tag="blockquote", children=(paragraph("world peace"),)),
    )


@pytest.fixture
def mixed_case_doc() -> DocNode:
    """Five case-insensitive hits of "ab", three of them lower-case."""
    return document(paragraph("ab Ab ab", "AB ab"))


@pytest.fixture
def presentation() -> FakePresentation:
    return FakePresentation()


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path
