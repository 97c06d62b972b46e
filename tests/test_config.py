"""Tests for core/config.py."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from passcrypt.core.cipher import create_cipher
from passcrypt.core.config import Settings, get_settings
from passcrypt.core.exceptions import ConfigurationError
from passcrypt.schemas.options import HashAlgorithm


def test_default_settings():
    s = Settings()
    assert s.passphrase == ""
    assert s.iv is None
    assert s.salt is None
    assert s.iterations == 1000
    assert s.desired_key_length == 16
    assert s.hash_algorithm == "SHA384"
    assert s.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PASSCRYPT_PASSPHRASE", "from-env")
    monkeypatch.setenv("PASSCRYPT_ITERATIONS", "5000")
    monkeypatch.setenv("PASSCRYPT_HASH_ALGORITHM", "sha-256")
    s = get_settings()
    assert s.passphrase == "from-env"
    assert s.iterations == 5000

    opts = s.to_options()
    assert opts.hash_algorithm is HashAlgorithm.SHA256


def test_settings_from_dotenv(tmp_path):
    (tmp_path / ".env").write_text("PASSCRYPT_SALT=dotenv-salt\n", encoding="utf-8")
    assert Settings().salt == "dotenv-salt"


def test_to_options_treats_empty_strings_as_unset():
    opts = Settings(passphrase="pw", iv="", salt="").to_options()
    assert opts.iv is None
    assert opts.salt is None
    assert opts.passphrase == "pw"


def test_to_options_rejects_unknown_hash():
    with pytest.raises(ConfigurationError, match="hash_algorithm"):
        Settings(hash_algorithm="MD5").to_options()


def test_insecure_defaults_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="passcrypt.core.config"):
        Settings()
    assert "Empty passphrase" in caplog.text
    assert "fallback IV" in caplog.text
    assert "without a salt" in caplog.text
    assert "iteration count" in caplog.text


def test_debug_mode_silences_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger="passcrypt.core.config"):
        Settings(debug=True)
    assert caplog.text == ""


def test_create_cipher_from_settings():
    settings = Settings(passphrase="pw", iv="abcede0123456789", salt="pepper")
    cipher = create_cipher(settings)
    assert cipher.decrypt_from_base64(cipher.encrypt_to_base64("round trip")) == "round trip"


def test_create_cipher_uses_cached_settings(monkeypatch):
    monkeypatch.setenv("PASSCRYPT_PASSPHRASE", "cached")
    cipher = create_cipher()
    assert cipher.options.passphrase == "cached"


def test_invalid_environment_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("PASSCRYPT_ITERATIONS", "abc")
    with pytest.raises(ConfigurationError, match="iterations"):
        get_settings()


def test_create_cipher_configures_logging(monkeypatch):
    seen = []
    monkeypatch.setattr(
        "passcrypt.core.cipher.configure_logging",
        lambda level, debug=False: seen.append((level, debug)),
    )
    create_cipher(Settings(passphrase="pw", log_level="DEBUG", debug=True))
    assert seen == [("DEBUG", True)]


_EXPLICIT_ROUNDTRIP = """
from passcrypt import CipherOptions, SymmetricCipher
c = SymmetricCipher(CipherOptions(passphrase="pw", iv="abcede0123456789", salt="pepper"))
assert c.decrypt(c.encrypt(b"x")) == b"x"
print("ok")
"""


def test_import_ignores_environment_settings():
    root = str(Path(__file__).resolve().parents[1])
    env = {**os.environ, "PASSCRYPT_ITERATIONS": "abc"}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [root, env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", _EXPLICIT_ROUNDTRIP],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip().splitlines()[-1] == "ok"
    output = result.stdout + result.stderr
    assert "No IV configured" not in output
    assert "Empty passphrase" not in output
