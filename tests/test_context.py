"""Tests for the explicit test context."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from remote_ivt.config import Config, HostKeyVerifier, Settings
from remote_ivt.context import TestContext
from remote_ivt.services.evidence import FileEvidenceStore
from remote_ivt.services.runner import CommandRunner


def make_config(tmp_path: Path, host: str = "lab") -> Config:
    return Config(
        settings=Settings(host=host, evidence_root=str(tmp_path / "evidence")),
        host_keys=HostKeyVerifier(known_hosts_path="none", strict_checking=False),
    )


@pytest.mark.asyncio
async def test_open_connects_and_creates_store(tmp_path: Path) -> None:
    session = MagicMock()

    async def fake_open_session(host, known_hosts=None, strict_host_key_checking=True):
        assert host.hostname == "lab"
        assert known_hosts is None
        assert strict_host_key_checking is False
        return session

    with patch("remote_ivt.context.open_session", side_effect=fake_open_session):
        context = await TestContext.open(make_config(tmp_path), run_name="smoke")

    assert context.session is session
    assert context.owns_session is True
    assert isinstance(context.evidence, FileEvidenceStore)
    assert context.evidence.root.parent == tmp_path / "evidence"
    assert context.evidence.root.name.startswith("smoke-")


@pytest.mark.asyncio
async def test_open_without_host_fails_before_connecting(tmp_path: Path) -> None:
    with patch("remote_ivt.context.open_session") as open_session:
        with pytest.raises(ValueError):
            await TestContext.open(make_config(tmp_path, host=""))

    open_session.assert_not_called()


def test_runner_uses_context_store(tmp_path: Path) -> None:
    store = FileEvidenceStore(tmp_path)
    context = TestContext(session=MagicMock(), evidence=store, config=make_config(tmp_path))

    runner = context.runner()

    assert isinstance(runner, CommandRunner)
    assert runner.evidence is store


def test_close_only_closes_owned_session(tmp_path: Path) -> None:
    borrowed = MagicMock()
    context = TestContext(
        session=borrowed, evidence=FileEvidenceStore(tmp_path), config=make_config(tmp_path)
    )

    context.close()

    borrowed.close.assert_not_called()


def test_close_owned_session_once(tmp_path: Path) -> None:
    owned = MagicMock()
    context = TestContext(
        session=owned,
        evidence=FileEvidenceStore(tmp_path),
        config=make_config(tmp_path),
        owns_session=True,
    )

    context.close()
    context.close()

    owned.close.assert_called_once()
