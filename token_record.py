# Filename: token_record.py

import json
import os
import tempfile
from typing import Any, Dict

from loguru import logger
from solders.pubkey import Pubkey

from models import RECORD_SCHEMA_VERSION, TokenRecord

REQUIRED_FIELDS = {
    "name": str,
    "symbol": str,
    "mint": str,
    "tokenAccount": str,
    "owner": str,
    "supply": int,
    "decimals": int,
    "network": str,
    "createdAt": str,
}

ADDRESS_FIELDS = ("mint", "tokenAccount", "owner")


class TokenRecordError(Exception):
    """The token info file is unreadable or does not match the record schema."""


def is_valid_address(address: str) -> bool:
    if not isinstance(address, str) or not 32 <= len(address) <= 44:
        return False
    try:
        Pubkey.from_string(address)
    except ValueError:
        return False
    return True


def validate_record_data(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TokenRecordError("token info must be a JSON object")

    version = data.get("schemaVersion")
    if version is None:
        logger.warning("[RECORD] No schemaVersion in token info, assuming version {}", RECORD_SCHEMA_VERSION)
    elif not isinstance(version, int) or isinstance(version, bool) or version > RECORD_SCHEMA_VERSION:
        raise TokenRecordError(f"unsupported token info schema version: {version!r}")

    for field, expected in REQUIRED_FIELDS.items():
        if field not in data:
            raise TokenRecordError(f"token info is missing '{field}'")
        value = data[field]
        # bool is an int subclass, a boolean supply is still malformed
        if not isinstance(value, expected) or isinstance(value, bool):
            raise TokenRecordError(f"token info field '{field}' must be {expected.__name__}")

    for field in ADDRESS_FIELDS:
        if not is_valid_address(data[field]):
            logger.error("[RECORD ❌] Invalid {} address: {}", field, data[field])
            raise TokenRecordError(f"token info field '{field}' is not a valid address")

    image_url = data.get("imageUrl")
    if image_url is not None and not isinstance(image_url, str):
        raise TokenRecordError("token info field 'imageUrl' must be str")

    return data


def record_exists(path: str) -> bool:
    return os.path.exists(path)


def load_record(path: str) -> TokenRecord:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TokenRecordError(f"token info file is not valid JSON: {e}") from e
    return TokenRecord.from_dict(validate_record_data(data))


def save_record(path: str, record: TokenRecord):
    """
    Write the record as indented JSON, replacing any existing file.

    The content goes to a temporary file in the same directory which is then
    renamed over the target, so readers never see a half-written record.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(dir=directory, prefix="." + os.path.basename(path) + ".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(record.to_dict(), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)
