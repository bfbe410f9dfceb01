"""
CLI Tests

Tests for forge_cli.main:
- keygen/sign/verify output and exit codes
- build subcommands print the instruction shape
- invalid input goes to stderr with exit code 1
- serve hands uvicorn an app built from the loaded configuration
"""
import base64
import json
import os
import struct

import pytest
from fastapi.testclient import TestClient

from core.codec.address import decode_address
from core.config.runtime import get_default_config, load_runtime_config
from forge_cli.main import main

from fixtures.common import make_address_text


ALICE = make_address_text(1)
BOB = make_address_text(2)
CAROL = make_address_text(3)


def _run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestKeyCommands:
    def test_keygen(self, capsys):
        code, out, _ = _run(capsys, "keygen")

        assert code == 0
        data = json.loads(out)
        assert str(decode_address(data["pubkey"])) == data["pubkey"]
        assert data["secret"]

    def test_sign_then_verify(self, capsys, keypair):
        code, out, _ = _run(capsys, "sign", "hello", "--secret", keypair.secret)
        assert code == 0
        signed = json.loads(out)
        assert signed["public_key"] == keypair.pubkey

        code, out, _ = _run(
            capsys, "verify", "hello",
            "--pubkey", keypair.pubkey,
            "--signature", signed["signature"],
        )
        assert code == 0
        assert json.loads(out)["valid"] is True

    def test_verify_mismatch_exit_code(self, capsys, keypair):
        _, out, _ = _run(capsys, "sign", "hello", "--secret", keypair.secret)
        signature = json.loads(out)["signature"]

        code, out, _ = _run(
            capsys, "verify", "goodbye",
            "--pubkey", keypair.pubkey,
            "--signature", signature,
        )
        assert code == 2
        assert json.loads(out)["valid"] is False

    def test_sign_secret_from_env(self, capsys, keypair, monkeypatch):
        monkeypatch.setenv("FORGE_SECRET", keypair.secret)

        code, out, _ = _run(capsys, "sign", "hello")

        assert code == 0
        assert json.loads(out)["public_key"] == keypair.pubkey

    def test_sign_without_secret(self, capsys):
        code, out, err = _run(capsys, "sign", "hello")

        assert code == 1
        assert out == ""
        assert "invalid secret" in err

    def test_verify_unencodable_message(self, capsys, keypair):
        code, out, err = _run(
            capsys, "verify", "\udfff",
            "--pubkey", keypair.pubkey,
            "--signature", base64.b64encode(bytes(64)).decode(),
        )

        assert code == 1
        assert out == ""
        assert "invalid message" in err


class TestBuildCommands:
    def test_transfer_native(self, capsys):
        code, out, _ = _run(
            capsys, "build", "transfer-native",
            "--from", ALICE, "--to", BOB, "--lamports", "1000",
        )

        assert code == 0
        data = json.loads(out)
        assert data["accounts"][0] == {"pubkey": ALICE, "is_signer": True, "is_writable": True}
        assert base64.b64decode(data["instruction_data"]) == struct.pack("<IQ", 2, 1000)

    def test_initialize_mint_without_freeze(self, capsys):
        code, out, _ = _run(
            capsys, "build", "initialize-mint",
            "--mint-authority", ALICE, "--mint", BOB, "--decimals", "6",
            "--no-freeze-authority",
        )

        assert code == 0
        raw = base64.b64decode(json.loads(out)["instruction_data"])
        assert raw[1] == 6
        assert raw[-1] == 0

    def test_transfer_token(self, capsys):
        code, out, _ = _run(
            capsys, "build", "transfer-token",
            "--source", ALICE, "--destination", BOB, "--owner", CAROL, "--amount", "3",
        )

        assert code == 0
        assert json.loads(out)["accounts"][2]["is_signer"] is True

    def test_mint_to(self, capsys):
        code, out, _ = _run(
            capsys, "build", "mint-to",
            "--mint", ALICE, "--destination", BOB, "--authority", CAROL, "--amount", "3",
        )

        assert code == 0
        assert base64.b64decode(json.loads(out)["instruction_data"])[0] == 7

    @pytest.mark.parametrize("argv", [
        ("build", "transfer-native", "--from", "bad0", "--to", BOB, "--lamports", "1"),
        ("build", "transfer-native", "--from", ALICE, "--to", BOB, "--lamports", "-5"),
        ("build", "initialize-mint", "--mint-authority", ALICE, "--mint", BOB, "--decimals", "300"),
    ])
    def test_invalid_input(self, capsys, argv):
        code, out, err = _run(capsys, *argv)

        assert code == 1
        assert out == ""
        assert err.startswith("Error:")


class TestServeCommand:
    @pytest.fixture
    def uvicorn_calls(self, monkeypatch):
        import uvicorn

        calls = {}

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setattr(uvicorn, "run", fake_run)
        return calls

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "service.yaml"
        path.write_text(
            "api:\n"
            "  title: Staging Forge\n"
            "  cors_origins: ['https://a.example']\n"
            "log_level: chatty\n"
        )
        return path

    def test_served_app_uses_config_file(self, uvicorn_calls, config_file):
        code = main(["--config", str(config_file), "serve", "--port", "9001"])

        assert code == 0
        app = uvicorn_calls["app"]
        assert app.title == "Staging Forge"
        assert uvicorn_calls["port"] == 9001
        assert get_default_config().api.cors_origins == ["https://a.example"]

        client = TestClient(app)
        allowed = client.get("/health", headers={"Origin": "https://a.example"})
        blocked = client.get("/health", headers={"Origin": "https://b.example"})
        assert allowed.headers["access-control-allow-origin"] == "https://a.example"
        assert "access-control-allow-origin" not in blocked.headers

    def test_unknown_log_level_falls_back_to_info(self, uvicorn_calls, config_file):
        main(["--config", str(config_file), "serve"])

        assert uvicorn_calls["log_level"] == "info"

    def test_cli_log_level_wins(self, uvicorn_calls, config_file):
        main(["--config", str(config_file), "--log-level", "WARNING", "serve"])

        assert uvicorn_calls["log_level"] == "warning"

    def test_reload_passes_config_path_to_worker(self, uvicorn_calls, config_file, monkeypatch):
        monkeypatch.setenv("FORGE_CONFIG", "")
        monkeypatch.setenv("FORGE_LOG_LEVEL", "")

        main(["--config", str(config_file), "serve", "--reload"])

        assert uvicorn_calls["app"] == "api.app:app"
        assert uvicorn_calls["reload"] is True
        assert os.environ["FORGE_CONFIG"] == str(config_file.resolve())
        assert load_runtime_config().api.title == "Staging Forge"


class TestMain:
    def test_no_command(self, capsys):
        assert main([]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
