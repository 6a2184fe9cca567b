"""Shared fixtures for the genepath test-suite."""

import sys
from pathlib import Path

# Ensure project root on path for direct test execution
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from genepath.config import build_settings
from genepath.dictionary import GeneDictionary

WORD_LADDER = ["CAT", "COT", "DOG", "COG"]


@pytest.fixture
def ladder_dictionary() -> GeneDictionary:
    return GeneDictionary(WORD_LADDER)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    path = tmp_path / "genes.txt"
    path.write_text("cat\nCOT\r\nDOG\n\nCOG\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, dictionary_file: Path):
    return build_settings(
        {
            "DICTIONARY": str(dictionary_file),
            "HISTORY": str(tmp_path / "gene_history.txt"),
            "ALPHABET": "",
            "EDIT_WEIGHT": 1,
            "GRAPH_STRATEGY": "bucket",
        }
    )
