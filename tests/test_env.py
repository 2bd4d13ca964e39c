from __future__ import annotations

from pathlib import Path

import pytest

from phashkit.errors import InvalidArgumentError
from phashkit.utils.env import (
    BLOCK_SIZE_ENV,
    LOG_LEVEL_ENV,
    STORE_ROOT_ENV,
    get_block_size,
    get_log_level,
    get_store_root,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (STORE_ROOT_ENV, BLOCK_SIZE_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)

    assert get_store_root() == Path("phash_store")
    assert get_block_size() == 10
    assert get_log_level() == "WARNING"


def test_environment_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(STORE_ROOT_ENV, str(tmp_path))
    monkeypatch.setenv(BLOCK_SIZE_ENV, "4")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    assert get_store_root() == tmp_path
    assert get_block_size() == 4
    assert get_log_level() == "DEBUG"


def test_overrides_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(STORE_ROOT_ENV, "elsewhere")
    monkeypatch.setenv(BLOCK_SIZE_ENV, "4")
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

    assert get_store_root(tmp_path) == tmp_path
    assert get_block_size(7) == 7
    assert get_log_level("info") == "INFO"


@pytest.mark.parametrize("raw", ["ten", "0", "-3"])
def test_bad_block_size(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(BLOCK_SIZE_ENV, raw)

    with pytest.raises(InvalidArgumentError):
        get_block_size()
