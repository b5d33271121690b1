import json
import subprocess
from types import SimpleNamespace

import pytest
from solders.hash import Hash
from solders.keypair import Keypair

from config import DEFAULT_CONFIG


def _resp(value):
    return SimpleNamespace(value=value)


class FakeClient:
    """Stands in for solana.rpc.api.Client; records every transaction sent."""

    def __init__(self, balance=2_000_000_000, existing_accounts=(), fail_on_send=None):
        self.balance = balance
        self.existing_accounts = set(existing_accounts)
        self.fail_on_send = fail_on_send
        self.sent = []
        self.confirmed = []
        self.rent_requests = []

    def get_balance(self, pubkey, *args, **kwargs):
        return _resp(self.balance)

    def get_minimum_balance_for_rent_exemption(self, size, *args, **kwargs):
        self.rent_requests.append(size)
        return _resp(1_000_000 + size)

    def get_latest_blockhash(self, *args, **kwargs):
        return _resp(SimpleNamespace(blockhash=Hash.default()))

    def send_transaction(self, txn, *args, **kwargs):
        if self.fail_on_send is not None and len(self.sent) == self.fail_on_send:
            raise RuntimeError("Transaction simulation failed: insufficient lamports")
        self.sent.append(txn)
        return _resp(txn.signatures[0])

    def confirm_transaction(self, signature, *args, **kwargs):
        self.confirmed.append(signature)
        return _resp([])

    def get_account_info(self, pubkey, *args, **kwargs):
        return _resp(object() if pubkey in self.existing_accounts else None)


class FakeRunner:
    """Stands in for subprocess.run when driving the spl-token binary."""

    def __init__(self, failures=None, version_ok=True, missing=False):
        self.failures = failures or {}
        self.version_ok = version_ok
        self.missing = missing
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if cmd[1] == "--version":
            return subprocess.CompletedProcess(cmd, 0 if self.version_ok else 1, stdout="spl-token-cli 4.0.0\n", stderr="")
        if cmd[1] == "update-metadata":
            returncode, stderr = self.failures.get(cmd[3], (0, ""))
            stdout = "Signature: 5xyz\n" if returncode == 0 else ""
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, 0)

    def update_calls(self):
        return [c for c in self.calls if c[1] == "update-metadata"]

    def updated_fields(self):
        return [c[3] for c in self.update_calls()]


@pytest.fixture
def wallet_keypair():
    return Keypair()


@pytest.fixture
def wallet_file(tmp_path, wallet_keypair):
    path = tmp_path / "livestream-wallet.json"
    path.write_text(json.dumps(list(bytes(wallet_keypair))))
    return path


@pytest.fixture
def app_config(tmp_path, wallet_file):
    config = dict(DEFAULT_CONFIG)
    config["WALLET_PATH"] = str(wallet_file)
    config["TOKEN_INFO_FILE"] = str(tmp_path / "learnsolana-info.json")
    return config


@pytest.fixture
def record_data(wallet_keypair):
    return {
        "schemaVersion": 1,
        "name": "LearnSolana",
        "symbol": "LEARN",
        "mint": str(Keypair().pubkey()),
        "tokenAccount": str(Keypair().pubkey()),
        "owner": str(wallet_keypair.pubkey()),
        "supply": 100,
        "decimals": 9,
        "targetPrice": "$1.00",
        "totalValue": "$100.00",
        "program": "TOKEN_2022",
        "metadataReady": True,
        "network": "devnet",
        "createdAt": "2026-01-01T00:00:00Z",
    }


@pytest.fixture
def record_file(app_config, record_data):
    path = app_config["TOKEN_INFO_FILE"]
    with open(path, "w") as f:
        json.dump(record_data, f, indent=2)
    return path
