"""Tests for the aggregated run configuration."""

from pathlib import Path

import pytest

from remote_ivt.config import Config, HostKeyVerifier, Settings


@pytest.fixture
def known_hosts(tmp_path: Path) -> Path:
    path = tmp_path / "known_hosts"
    path.touch()
    return path


def test_from_env_builds_components(
    known_hosts: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REMOTE_IVT_HOST", "lab")
    monkeypatch.setenv("REMOTE_IVT_KNOWN_HOSTS", str(known_hosts))
    monkeypatch.setenv("REMOTE_IVT_STRICT_HOST_KEY_CHECKING", "true")

    config = Config.from_env()

    assert config.settings.host == "lab"
    assert config.known_hosts_path == str(known_hosts)
    assert config.strict_host_key_checking is True


def test_strict_checking_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REMOTE_IVT_KNOWN_HOSTS", "none")
    monkeypatch.setenv("REMOTE_IVT_STRICT_HOST_KEY_CHECKING", "false")

    config = Config.from_env()

    assert config.known_hosts_path is None
    assert config.strict_host_key_checking is False


def test_get_host_uses_settings() -> None:
    config = Config(
        settings=Settings(host="lab", user="tester", port=2200, identity_file="/k"),
        host_keys=HostKeyVerifier(known_hosts_path="none"),
    )

    host = config.get_host()

    assert host.name == "lab"
    assert host.hostname == "lab"
    assert host.user == "tester"
    assert host.port == 2200
    assert host.identity_file == "/k"


def test_get_host_requires_host() -> None:
    config = Config(settings=Settings(), host_keys=HostKeyVerifier(known_hosts_path="none"))

    with pytest.raises(ValueError, match="REMOTE_IVT_HOST"):
        config.get_host()


def test_delegating_properties() -> None:
    settings = Settings(
        evidence_root="/srv/evidence",
        maven_repository="https://repo.example.com/maven",
        runtime_version="0.4.0",
    )
    config = Config(settings=settings, host_keys=HostKeyVerifier(known_hosts_path="none"))

    assert config.evidence_root == "/srv/evidence"
    assert config.maven_repository == "https://repo.example.com/maven"
    assert config.runtime_version == "0.4.0"
