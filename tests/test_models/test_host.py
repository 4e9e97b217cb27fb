"""Tests for SSHHost and StepReport models."""

from remote_ivt.models import CommandResult, SSHHost, StepReport


def test_ssh_host_defaults_left_to_ssh_config() -> None:
    host = SSHHost(name="lab", hostname="lab")

    assert host.user is None
    assert host.port is None
    assert host.identity_file is None


def test_display_includes_user_and_port() -> None:
    host = SSHHost(name="lab", hostname="lab.example.com", user="tester", port=2222)

    assert host.display == "tester@lab.example.com:2222"


def test_display_with_hostname_only() -> None:
    assert SSHHost(name="lab", hostname="lab.example.com").display == "lab.example.com"


def test_step_report_without_command_succeeds() -> None:
    assert StepReport(name="setup_m2").succeeded is True


def test_step_report_follows_result() -> None:
    assert StepReport("run", CommandResult("c", "rc=2", 2)).succeeded is False
    assert StepReport("run", CommandResult("c", "rc=0", 0)).succeeded is True
