"""Tests for the passcrypt CLI."""

import pytest
from click.testing import CliRunner

from passcrypt.cli.main import cli

OPTS = [
    "--passphrase", "0123456789",
    "--iv", "abcede0123456789",
    "--salt", "0123456789abcede",
    "--iterations", "1000",
    "--key-length", "16",
    "--hash", "sha512",
]


@pytest.fixture
def runner():
    return CliRunner()


def test_text_roundtrip(runner):
    r = runner.invoke(cli, OPTS + ["encrypt", "--text", "Hello world"])
    assert r.exit_code == 0, r.output
    encoded = r.stdout.strip()
    assert encoded

    r2 = runner.invoke(cli, OPTS + ["decrypt", "--data", encoded])
    assert r2.exit_code == 0, r2.output
    assert r2.stdout.strip() == "Hello world"


def test_options_from_environment(runner, monkeypatch):
    monkeypatch.setenv("PASSCRYPT_PASSPHRASE", "env-pass")
    monkeypatch.setenv("PASSCRYPT_IV", "abcede0123456789")
    r = runner.invoke(cli, ["encrypt", "--text", "from env"])
    assert r.exit_code == 0, r.output

    r2 = runner.invoke(cli, ["decrypt", "--data", r.stdout.strip()])
    assert r2.stdout.strip() == "from env"


def test_file_roundtrip(runner, tmp_path):
    payload = bytes(range(256)) * 700
    src = tmp_path / "plain.bin"
    enc = tmp_path / "cipher.bin"
    out = tmp_path / "restored.bin"
    src.write_bytes(payload)

    r = runner.invoke(cli, OPTS + ["encrypt", "--in-file", str(src), "--out-file", str(enc)])
    assert r.exit_code == 0, r.output
    assert enc.read_bytes() != payload

    r2 = runner.invoke(cli, OPTS + ["decrypt", "--in-file", str(enc), "--out-file", str(out)])
    assert r2.exit_code == 0, r2.output
    assert out.read_bytes() == payload


def test_malformed_base64_exit_code(runner):
    r = runner.invoke(cli, OPTS + ["decrypt", "--data", "not-valid-base64!!"])
    assert r.exit_code == 1
    assert "EncodingError" in r.output


def test_wrong_passphrase_exit_code(runner):
    r = runner.invoke(cli, OPTS + ["encrypt", "--text", "secret"])
    encoded = r.stdout.strip()

    wrong = ["--passphrase", "nope"] + OPTS[2:]
    r2 = runner.invoke(cli, wrong + ["decrypt", "--data", encoded])
    assert r2.exit_code != 0 or r2.stdout.strip() != "secret"


def test_bad_iv_exit_code(runner):
    r = runner.invoke(cli, ["--passphrase", "pw", "--iv", "short", "encrypt", "--text", "x"])
    assert r.exit_code == 2
    assert "ConfigurationError" in r.output


def test_requires_exactly_one_input(runner, tmp_path):
    src = tmp_path / "plain.bin"
    src.write_bytes(b"x")
    r = runner.invoke(cli, OPTS + ["encrypt", "--text", "x", "--in-file", str(src)])
    assert r.exit_code == 2

    r2 = runner.invoke(cli, OPTS + ["decrypt"])
    assert r2.exit_code == 2


def test_config_show_masks_passphrase(runner):
    r = runner.invoke(cli, OPTS + ["config", "show"])
    assert r.exit_code == 0, r.output
    assert "SHA-512" in r.output
    assert "abcede0123456789" in r.output
    assert "0123456789abcede" in r.output
    assert "********" in r.output


def test_invalid_environment_exit_code(runner, monkeypatch):
    monkeypatch.setenv("PASSCRYPT_ITERATIONS", "abc")
    r = runner.invoke(cli, OPTS + ["encrypt", "--text", "x"])
    assert r.exit_code == 2
    assert "ConfigurationError" in r.output
