# Filename: create_token.py

import logging
import sys
from typing import Any, Dict, List, Optional

from solana.rpc.api import Client
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import CreateAccountParams, create_account
from solders.transaction import Transaction
from spl.token.constants import TOKEN_2022_PROGRAM_ID
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    create_associated_token_account,
    get_associated_token_address,
    initialize_mint,
    mint_to,
)

from config import explorer_url, load_config, setup_logging, wallet_path
from models import TokenRecord, utc_timestamp
from token_2022 import ExtensionType, get_mint_len, initialize_metadata_pointer
from token_record import save_record
from wallet import load_keypair

logger = logging.getLogger("create_token")

LAMPORTS_PER_SOL = 1_000_000_000

# Extensions the mint is created with; its account size is computed from this list
MINT_EXTENSIONS = [ExtensionType.MetadataPointer]

ERROR_HINTS = [
    "Make sure you have enough SOL (need ~0.01 SOL)",
    "Check wallet file path",
    "Ensure you're on devnet",
    "Verify the Python dependencies are installed (solana, solders)",
]


class TokenCreator:
    """
    Creates a Token-2022 mint with a metadata pointer, an associated token
    account for the wallet, and mints the configured supply into it.
    """

    def __init__(self, config_data: Optional[Dict[str, Any]] = None, client=None):
        self.config = config_data if config_data is not None else load_config()
        self.client = client or Client(
            self.config["RPC_HTTP_ENDPOINT"],
            commitment=self.config.get("COMMITMENT", "confirmed")
        )
        self.decimals = int(self.config.get("TOKEN_DECIMALS", 9))
        self.supply = int(self.config.get("TOKEN_SUPPLY", 100))

    def _send(self, payer: Keypair, instructions: List[Instruction], signers: List[Keypair]) -> Signature:
        blockhash = self.client.get_latest_blockhash().value.blockhash
        message = Message.new_with_blockhash(instructions, payer.pubkey(), blockhash)
        transaction = Transaction(signers, message, blockhash)
        signature = self.client.send_transaction(transaction).value
        self.client.confirm_transaction(signature)
        logger.debug(f"Confirmed transaction {signature}")
        return signature

    def get_balance_sol(self, owner: Pubkey) -> float:
        return self.client.get_balance(owner).value / LAMPORTS_PER_SOL

    def build_mint_instructions(self, payer: Pubkey, mint: Pubkey, lamports: int, space: int) -> List[Instruction]:
        # The pointer must be initialized before the mint, or InitializeMint rejects the account
        return [
            create_account(CreateAccountParams(
                from_pubkey=payer,
                to_pubkey=mint,
                lamports=lamports,
                space=space,
                owner=TOKEN_2022_PROGRAM_ID,
            )),
            initialize_metadata_pointer(mint, payer, mint, TOKEN_2022_PROGRAM_ID),
            initialize_mint(InitializeMintParams(
                decimals=self.decimals,
                program_id=TOKEN_2022_PROGRAM_ID,
                mint=mint,
                mint_authority=payer,
                freeze_authority=payer,
            )),
        ]

    def create_mint(self, payer: Keypair) -> Keypair:
        mint_keypair = Keypair()
        mint = mint_keypair.pubkey()

        logger.info("🔨 Creating mint with metadata support...")
        space = get_mint_len(MINT_EXTENSIONS)
        lamports = self.client.get_minimum_balance_for_rent_exemption(space).value

        instructions = self.build_mint_instructions(payer.pubkey(), mint, lamports, space)
        self._send(payer, instructions, [payer, mint_keypair])

        logger.info(f"✅ Mint created: {mint}")
        return mint_keypair

    def get_or_create_token_account(self, payer: Keypair, mint: Pubkey) -> Pubkey:
        owner = payer.pubkey()
        address = get_associated_token_address(owner, mint, token_program_id=TOKEN_2022_PROGRAM_ID)

        if self.client.get_account_info(address).value is None:
            instruction = create_associated_token_account(
                payer=owner, owner=owner, mint=mint, token_program_id=TOKEN_2022_PROGRAM_ID
            )
            self._send(payer, [instruction], [payer])
        else:
            logger.info("ℹ️  Token account already exists")

        return address

    def mint_supply(self, payer: Keypair, mint: Pubkey, destination: Pubkey) -> Signature:
        amount = self.supply * (10 ** self.decimals)
        instruction = mint_to(MintToParams(
            program_id=TOKEN_2022_PROGRAM_ID,
            mint=mint,
            dest=destination,
            mint_authority=payer.pubkey(),
            amount=amount,
        ))
        return self._send(payer, [instruction], [payer])

    def build_record(self, payer: Pubkey, mint: Pubkey, token_account: Pubkey) -> TokenRecord:
        price = float(self.config.get("TARGET_PRICE_USD", 1.0))
        return TokenRecord(
            name=self.config["TOKEN_NAME"],
            symbol=self.config["TOKEN_SYMBOL"],
            mint=str(mint),
            token_account=str(token_account),
            owner=str(payer),
            supply=self.supply,
            decimals=self.decimals,
            network=self.config.get("NETWORK", "devnet"),
            created_at=utc_timestamp(),
            target_price=f"${price:,.2f}",
            total_value=f"${price * self.supply:,.2f}",
            program="TOKEN_2022",
            metadata_ready=True,
        )

    def run(self) -> TokenRecord:
        name = self.config["TOKEN_NAME"]
        symbol = self.config["TOKEN_SYMBOL"]
        price = float(self.config.get("TARGET_PRICE_USD", 1.0))

        logger.info(f"🚀 Creating {name} Token...")
        logger.info(f"💰 Target: {self.supply} tokens at ${price:,.2f} each (${price * self.supply:,.2f} total value)")

        payer = load_keypair(wallet_path(self.config))
        logger.info(f"👛 Wallet: {payer.pubkey()}")
        logger.info(f"💰 SOL Balance: {self.get_balance_sol(payer.pubkey())} SOL")

        mint = self.create_mint(payer).pubkey()

        logger.info("🏦 Creating token account...")
        token_account = self.get_or_create_token_account(payer, mint)
        logger.info(f"✅ Token account: {token_account}")

        logger.info(f"🪙 Minting {self.supply} {name} tokens...")
        self.mint_supply(payer, mint, token_account)

        record = self.build_record(payer.pubkey(), mint, token_account)
        info_file = self.config["TOKEN_INFO_FILE"]
        save_record(info_file, record)

        network = record.network
        logger.info(f"🎉 SUCCESS! {name} Token Created!")
        logger.info("📊 Token Details:")
        logger.info(f"   🏷️  Name: {name}")
        logger.info(f"   🔤 Symbol: {symbol}")
        logger.info(f"   🏭 Mint Address: {mint}")
        logger.info(f"   🏦 Token Account: {token_account}")
        logger.info(f"   📦 Supply: {self.supply} {symbol} tokens")
        logger.info(f"   🎯 Target Price: {record.target_price} per token")
        logger.info(f"   💵 Total Value: {record.total_value}")
        logger.info(f"   🌐 Network: Solana {network.capitalize()}")
        logger.info("   🎯 Metadata: Ready for naming")
        logger.info("🔍 View on Explorer:")
        logger.info(f"   {explorer_url(str(mint), network)}")
        logger.info(f"📄 Token info saved to: {info_file}")
        return record


def create_learnsolana_token(config_data: Optional[Dict[str, Any]] = None, client=None) -> int:
    try:
        TokenCreator(config_data=config_data, client=client).run()
        return 0
    except Exception as e:
        logger.error(f"❌ Error creating token: {e}")
        logger.info("\n💡 Common solutions:")
        for hint in ERROR_HINTS:
            logger.info(f"   - {hint}")
        return 1


def main() -> int:
    config = load_config()
    setup_logging(config)
    return create_learnsolana_token(config)


if __name__ == "__main__":
    sys.exit(main())
