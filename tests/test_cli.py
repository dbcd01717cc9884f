"""
Tests for the command-line interface.
"""

import json

import pytest

from upi_deeplink import SANDBOX_BASE, DeeplinkClient, cli

from .conftest import FakeSession, echo_handler

CREDENTIALS = [
    "--set", "DEEPLINK_SCHEME_ID=scheme",
    "--set", "DEEPLINK_SECRET=secret",
    "--set", "DEEPLINK_PRODUCT_INSTANCE_ID=instance",
]


@pytest.fixture
def session(monkeypatch):
    """Route every client built by the CLI through a fake session."""
    fake = FakeSession(echo_handler)

    def _create_client(*, config, session):
        return DeeplinkClient.from_config(config, session=fake)

    monkeypatch.setattr(cli, "create_client", _create_client)
    return fake


@pytest.fixture
def run(tmp_path):
    def _run(*args):
        argv = ["--env-file", str(tmp_path / "missing.env"), *CREDENTIALS, *args]
        return cli.run_cli(argv)

    return _run


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_bad_override(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--set", "novalue", "status", "x"])

    def test_bad_json(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["create-link", "{not json"])

    def test_json_from_file(self, tmp_path):
        payload = tmp_path / "payload.json"
        payload.write_text('{"amount": 100}')
        args = cli.build_parser().parse_args(["create-link", f"@{payload}"])
        assert args.payload == {"amount": 100}


class TestCommands:
    """Tests for each subcommand."""

    def test_create_link(self, run, session, capsys):
        assert run("create-link", '{"amount": 100}') == 0
        assert json.loads(capsys.readouterr().out) == {"amount": 100}
        assert session.calls[0]["url"] == SANDBOX_BASE + "/payment-links"

    def test_status(self, run, session):
        assert run("status", "bill-1") == 0
        assert session.calls[0]["url"].endswith("/payment-links/bill-1")

    def test_mock_payment(self, run, session, capsys):
        assert run("mock-payment", "100", "cust@upi", "bill-1") == 0
        assert json.loads(capsys.readouterr().out)["upiId"] == "cust@upi"
        assert session.calls[0]["json"]["amountValue"] == 100
        assert isinstance(session.calls[0]["json"]["amountValue"], int)

    def test_mock_payment_in_production(self, run, session):
        assert run("--set", "DEEPLINK_MODE=PRODUCTION", "mock-payment", "1", "u", "b") == 1
        assert session.calls == []

    def test_batch_refund(self, run, session, capsys):
        assert run("batch-refund", '[{"identifier": "bill-1"}]') == 0
        assert json.loads(capsys.readouterr().out) == {"refunds": [{"identifier": "bill-1"}]}

    def test_batch_refund_requires_list(self, run, session):
        assert run("batch-refund", '{"identifier": "bill-1"}') == 1
        assert session.calls == []

    def test_refund_status(self, run, session):
        assert run("refund-status", "batch", "b-1") == 0
        assert "Authorization" not in session.calls[0]["headers"]

    def test_api_error(self, run, session):
        session.handler = lambda *args: (500, {"message": "bad"})
        assert run("status", "bill-1") == 1

    def test_invalid_configuration(self, tmp_path, session):
        argv = ["--env-file", str(tmp_path / "missing.env"), "--set", "DEEPLINK_MODE=nope"]
        assert cli.run_cli([*argv, *CREDENTIALS, "status", "x"]) == 1
