"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from funquizz.questions import Answer, Question, ScoringVariant  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (touch the filesystem)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def make_question():
    """Build an unshuffled question: answers given as (text, is_correct) pairs."""
    def _make(text="Q", answers=(("A", True), ("B", False)), variant=ScoringVariant.SINGLE,
              explanation="Because."):
        return Question(
            text=text,
            answers=tuple(Answer(t, c) for t, c in answers),
            variant=ScoringVariant(variant),
            explanation=explanation,
        )
    return _make


@pytest.fixture
def sample_question_record():
    """Provide a stored question record."""
    return {
        "type": "single",
        "text": "Which layer of the OSI model handles routing?",
        "explanation": "Routers forward packets at Layer 3.",
        "answers": [
            {"text": "Physical Layer", "is_correct": False},
            {"text": "Data Link Layer", "is_correct": False},
            {"text": "Network Layer", "is_correct": True},
            {"text": "Transport Layer", "is_correct": False},
        ],
    }


@pytest.fixture
def sample_document(sample_question_record):
    """Provide a whole repository document with one question per variant."""
    return {
        "type": "intelligent",
        "questions": [
            sample_question_record,
            {
                "type": "negative_single",
                "text": "What is the default subnet mask for a Class C network?",
                "answers": [
                    {"text": "255.0.0.0", "is_correct": False},
                    {"text": "255.255.255.0", "is_correct": True},
                ],
            },
            {
                "type": "skippable_negative_single",
                "text": "Which port does HTTPS use by default?",
                "explanation": "TLS-wrapped HTTP listens on 443.",
                "answers": [
                    {"text": "80", "is_correct": False},
                    {"text": "443", "is_correct": True},
                    {"text": "8080", "is_correct": False},
                ],
            },
            {
                "type": "multiple",
                "text": "Which of these are transport layer protocols?",
                "explanation": "TCP and UDP.",
                "answers": [
                    {"text": "TCP", "is_correct": True},
                    {"text": "UDP", "is_correct": True},
                    {"text": "IP", "is_correct": False},
                    {"text": "ARP", "is_correct": False},
                ],
            },
            {
                "type": "negative_multiple",
                "text": "Which addresses are private IPv4 ranges?",
                "explanation": "RFC 1918.",
                "answers": [
                    {"text": "10.0.0.0/8", "is_correct": True},
                    {"text": "172.16.0.0/12", "is_correct": True},
                    {"text": "192.168.0.0/16", "is_correct": True},
                    {"text": "8.8.8.0/24", "is_correct": False},
                ],
            },
        ],
    }


@pytest.fixture
def repository_file(tmp_path, sample_document):
    """Write the sample document to a temporary file and return its path."""
    path = tmp_path / "networking.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
