import json

import pytest

from wallet import WalletError, load_keypair, read_secret_key


def test_load_keypair_matches_file(wallet_file, wallet_keypair):
    assert load_keypair(str(wallet_file)).pubkey() == wallet_keypair.pubkey()


def test_missing_file(tmp_path):
    with pytest.raises(WalletError, match="not found"):
        read_secret_key(str(tmp_path / "missing.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "wallet.json"
    path.write_text("[1, 2,")
    with pytest.raises(WalletError, match="Could not read"):
        read_secret_key(str(path))


@pytest.mark.parametrize("content", [{"a": 1}, [1, "2"], [True, False]])
def test_non_integer_array(tmp_path, content):
    path = tmp_path / "wallet.json"
    path.write_text(json.dumps(content))
    with pytest.raises(WalletError, match="JSON array of integers"):
        read_secret_key(str(path))


def test_keypair_needs_64_bytes(tmp_path):
    path = tmp_path / "wallet.json"
    path.write_text(json.dumps([1] * 32))
    with pytest.raises(WalletError, match="64 bytes"):
        load_keypair(str(path))


def test_undecodable_file(tmp_path):
    path = tmp_path / "wallet.json"
    path.write_bytes(b"\xff\xfe[1,2]")
    with pytest.raises(WalletError, match="Could not read"):
        read_secret_key(str(path))
