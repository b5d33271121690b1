# Filename: wallet.py

import json
import os
from typing import List

from solders.keypair import Keypair

SECRET_KEY_LENGTH = 64


class WalletError(Exception):
    """The wallet file is missing or does not hold a usable secret key."""


def read_secret_key(path: str) -> List[int]:
    """
    Read a keypair file as written by `solana-keygen new --outfile`:
    a JSON array with the 64 secret key bytes.
    """
    if not os.path.exists(path):
        raise WalletError(f"Wallet file not found at: {path}")

    try:
        with open(path, "r") as f:
            secret_key = json.load(f)
    except (OSError, ValueError) as e:
        raise WalletError(f"Could not read wallet file {path}: {e}") from e

    if not isinstance(secret_key, list) or not all(
        isinstance(b, int) and not isinstance(b, bool) for b in secret_key
    ):
        raise WalletError(f"Wallet file {path} must contain a JSON array of integers")

    return secret_key


def load_keypair(path: str) -> Keypair:
    secret_key = read_secret_key(path)
    if len(secret_key) != SECRET_KEY_LENGTH:
        raise WalletError(f"Wallet secret key must be {SECRET_KEY_LENGTH} bytes, got {len(secret_key)}")

    try:
        return Keypair.from_bytes(bytes(secret_key))
    except ValueError as e:
        raise WalletError(f"Invalid wallet secret key: {e}") from e
