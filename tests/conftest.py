#!/usr/bin/env python3
"""Shared pytest fixtures for readability tests."""

from pathlib import Path

import pytest

from readability_estimator.text_statistics import TextStatistics

SAMPLE_TEXT = "The cat sat on the mat. It was a sunny day."


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep READABILITY_* settings from the developer's shell out of the tests.

    Setting before deleting makes monkeypatch remove anything a test loads
    from a .env file once the test is done.
    """
    for name in ("READABILITY_LOG_LEVEL", "READABILITY_DEFAULT_COMMAND"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def sample_text() -> str:
    """Two short sentences, eleven words, no polysyllables."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """
    Create a temporary text file with the sample text.

    Args:
        tmp_path: pytest's built-in temporary directory fixture

    Returns:
        Path to the created temporary file
    """
    text_file = tmp_path / "sample.txt"
    text_file.write_text(SAMPLE_TEXT, encoding="utf-8")
    return text_file


@pytest.fixture
def sample_text_directory(tmp_path: Path) -> Path:
    """
    Create a temporary directory with multiple text files for batch testing.

    Args:
        tmp_path: pytest's built-in temporary directory fixture

    Returns:
        Path to the directory containing text files
    """
    text_dir = tmp_path / "texts"
    text_dir.mkdir()

    (text_dir / "file1.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
    (text_dir / "file2.txt").write_text("Readability is beautiful. ", encoding="utf-8")
    (text_dir / "file3.txt").write_text("", encoding="utf-8")

    # Also add a non-txt file to ensure it's ignored
    (text_dir / "README.md").write_text("# Not a text file", encoding="utf-8")

    return text_dir


@pytest.fixture
def reference_statistics() -> TextStatistics:
    """
    Statistics for a 100-word, 5-sentence text.

    500 characters, 150 syllables, 10 of the words with three syllables.
    """
    per_word = (3,) * 10 + (2,) * 30 + (1,) * 60
    return TextStatistics(
        sentence_count=5,
        word_count=100,
        char_count=500,
        syllable_count=150,
        polysyllable_count=10,
        syllables_per_word=per_word,
    )
