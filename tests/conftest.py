"""Shared fixtures for transkey tests."""
import json
import sys
from pathlib import Path

import pytest

# Ensure src is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def locale_dir(tmp_path):
    """Directory with en_US and pl_PL greetings."""
    (tmp_path / "en_US.json").write_text(json.dumps({"greeting": "hi"}), "utf-8")
    (tmp_path / "pl_PL.json").write_text(
        json.dumps({"greeting": "cześć"}, ensure_ascii=False), "utf-8"
    )
    return tmp_path
