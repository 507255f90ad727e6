"""Shared fixtures for tests."""

import logging
from pathlib import Path

import pytest

from structgen.graph.builder import build_type_graph
from structgen.schema.loader import parse_document_from_string


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers a CLI invocation attached to the package logger."""
    yield
    logger = logging.getLogger("structgen")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def person_yaml() -> str:
    """Return a document with a single object type."""
    return """
types:
  Person:
    kind: object
    properties:
      name: string
      age:
        type: integer
        optional: true

top_levels:
  - Person
"""


@pytest.fixture
def linked_yaml() -> str:
    """Return a document where A references B, declared before it."""
    return """
types:
  A:
    kind: object
    properties:
      field: B

  B:
    kind: object
    properties:
      value: double

top_levels:
  - A
"""


@pytest.fixture
def person_document(person_yaml):
    """Return the parsed person document."""
    return parse_document_from_string(person_yaml)


@pytest.fixture
def person_graph(person_document):
    """Return the type graph built from the person document."""
    return build_type_graph(person_document)


@pytest.fixture
def linked_graph(linked_yaml):
    """Return the type graph built from the linked document."""
    return build_type_graph(parse_document_from_string(linked_yaml))
