"""
Token-2022 helpers that solana-py does not ship: mint account sizing for
extensions and the metadata pointer initialize instruction.
"""

from enum import IntEnum
from typing import Iterable, Optional

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from spl.token.constants import TOKEN_2022_PROGRAM_ID

MINT_SIZE = 82
ACCOUNT_SIZE = 165
MULTISIG_SIZE = 355
ACCOUNT_TYPE_SIZE = 1
TYPE_SIZE = 2
LENGTH_SIZE = 2

# Token-2022 instruction discriminators
METADATA_POINTER_EXTENSION = 39
METADATA_POINTER_INITIALIZE = 0


class ExtensionType(IntEnum):
    TransferFeeConfig = 1
    MintCloseAuthority = 3
    DefaultAccountState = 6
    NonTransferable = 9
    InterestBearingConfig = 10
    PermanentDelegate = 12
    TransferHook = 14
    MetadataPointer = 18
    GroupPointer = 20


# Size of each extension's state, excluding the TLV header
EXTENSION_SIZES = {
    ExtensionType.TransferFeeConfig: 108,
    ExtensionType.MintCloseAuthority: 32,
    ExtensionType.DefaultAccountState: 1,
    ExtensionType.NonTransferable: 0,
    ExtensionType.InterestBearingConfig: 52,
    ExtensionType.PermanentDelegate: 32,
    ExtensionType.TransferHook: 64,
    ExtensionType.MetadataPointer: 64,
    ExtensionType.GroupPointer: 64,
}


def get_mint_len(extensions: Iterable[ExtensionType]) -> int:
    """
    Account size needed for a mint carrying the given extensions.

    A mint without extensions keeps the legacy 82 byte layout. With extensions
    the base is padded to the token account size, followed by the account type
    byte and one type/length/value entry per extension. A result equal to the
    multisig size gets two extra bytes so the account cannot be mistaken for one.
    """
    extensions = list(dict.fromkeys(extensions))
    if not extensions:
        return MINT_SIZE

    length = ACCOUNT_SIZE + ACCOUNT_TYPE_SIZE
    for extension in extensions:
        if extension not in EXTENSION_SIZES:
            raise ValueError(f"Unsupported mint extension: {extension!r}")
        length += TYPE_SIZE + LENGTH_SIZE + EXTENSION_SIZES[extension]

    if length == MULTISIG_SIZE:
        return length + TYPE_SIZE
    return length


def _optional_pubkey_bytes(pubkey: Optional[Pubkey]) -> bytes:
    return bytes(pubkey) if pubkey is not None else bytes(32)


def initialize_metadata_pointer(
    mint: Pubkey,
    authority: Optional[Pubkey],
    metadata_address: Optional[Pubkey],
    program_id: Pubkey = TOKEN_2022_PROGRAM_ID,
) -> Instruction:
    """
    Build the MetadataPointer Initialize instruction. It must run before the
    mint itself is initialized, in the same transaction as the account creation.
    """
    data = (
        bytes([METADATA_POINTER_EXTENSION, METADATA_POINTER_INITIALIZE])
        + _optional_pubkey_bytes(authority)
        + _optional_pubkey_bytes(metadata_address)
    )
    return Instruction(
        program_id=program_id,
        accounts=[AccountMeta(pubkey=mint, is_signer=False, is_writable=True)],
        data=data,
    )
