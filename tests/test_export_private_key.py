import json
import logging

import base58

from export_private_key import SEPARATOR, encode_secret_key, export_private_key


def _write_wallet(path, secret_key):
    path.write_text(json.dumps(secret_key))
    return path


def _exported_key(output):
    lines = output.splitlines()
    start = lines.index(SEPARATOR)
    return lines[start + 1]


def test_exported_key_decodes_to_wallet_bytes(app_config, tmp_path, capsys):
    secret_key = list(range(1, 65))
    _write_wallet(tmp_path / "wallet.json", secret_key)
    app_config["WALLET_PATH"] = str(tmp_path / "wallet.json")

    assert export_private_key(app_config) == 0

    exported = _exported_key(capsys.readouterr().out)
    assert exported
    assert list(base58.b58decode(exported)) == secret_key


def test_encoding_matches_keypair_string(wallet_keypair):
    assert encode_secret_key(list(bytes(wallet_keypair))) == str(wallet_keypair)


def test_output_carries_security_warning(app_config, capsys):
    assert export_private_key(app_config) == 0

    out = capsys.readouterr().out
    assert "SECURITY WARNING" in out
    assert "Never share this private key" in out
    assert "Import Private Key" in out


def test_missing_wallet_prints_keygen_hint(app_config, tmp_path, capsys, caplog):
    caplog.set_level(logging.INFO)
    app_config["WALLET_PATH"] = str(tmp_path / "nope.json")

    assert export_private_key(app_config) == 1
    assert "Wallet file not found" in caplog.text
    assert "solana-keygen new --outfile" in caplog.text
    assert SEPARATOR not in capsys.readouterr().out


def test_unencodable_key_falls_back_to_raw_array(app_config, tmp_path, capsys):
    _write_wallet(tmp_path / "wallet.json", [300] + [1] * 63)
    app_config["WALLET_PATH"] = str(tmp_path / "wallet.json")

    assert export_private_key(app_config) == 1

    out = capsys.readouterr().out
    assert "[300,1,1," in out
    assert "Manual conversion" in out
    assert "https://bs58.dev" in out


def test_short_key_is_encoded_with_warning(app_config, tmp_path, capsys, caplog):
    caplog.set_level(logging.INFO)
    _write_wallet(tmp_path / "wallet.json", [7] * 32)
    app_config["WALLET_PATH"] = str(tmp_path / "wallet.json")

    assert export_private_key(app_config) == 0
    assert "wallet import expects 64" in caplog.text
    assert list(base58.b58decode(_exported_key(capsys.readouterr().out))) == [7] * 32


def test_non_array_wallet_is_rejected(app_config, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    (tmp_path / "wallet.json").write_text('{"secret": "abc"}')
    app_config["WALLET_PATH"] = str(tmp_path / "wallet.json")

    assert export_private_key(app_config) == 1
    assert "JSON array of integers" in caplog.text


def test_undecodable_wallet_is_reported(app_config, tmp_path, capsys, caplog):
    caplog.set_level(logging.INFO)
    (tmp_path / "wallet.json").write_bytes(b"\xff\xfe[1,2]")
    app_config["WALLET_PATH"] = str(tmp_path / "wallet.json")

    assert export_private_key(app_config) == 1
    assert "Could not read wallet file" in caplog.text
    assert SEPARATOR not in capsys.readouterr().out
