"""Pytest configuration for phashkit tests."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _reset_phashkit_logger() -> Iterator[None]:
    """Drop handlers installed by CLI invocations so they don't outlive the test."""

    yield
    logger = logging.getLogger("phashkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def palette_file(tmp_path: Path) -> Path:
    path = tmp_path / "palette.yaml"
    path.write_text(
        "colors:\n"
        "  - '#ffffff'\n"
        "  - [200, 30, 30]\n"
        "  - '#000000'\n",
        encoding="utf-8",
    )
    return path
