# Filename: export_private_key.py

import logging
import sys
from typing import Any, Dict, List, Optional

import base58

from config import load_config, setup_logging, wallet_path
from wallet import SECRET_KEY_LENGTH, WalletError, read_secret_key

logger = logging.getLogger("export_private_key")

SEPARATOR = "═══════════════════════════════════════════════"


def encode_secret_key(secret_key: List[int]) -> str:
    """Base58 text form of the secret key, as accepted by wallet import dialogs."""
    return base58.b58encode(bytes(secret_key)).decode("ascii")


def print_manual_conversion(secret_key: List[int]):
    print("\n📄 Secret key array (convert at bs58.dev):")
    print("[" + ",".join(str(b) for b in secret_key) + "]")
    print("\n🔧 Manual conversion:")
    print("1. Go to https://bs58.dev")
    print("2. Paste the array above")
    print('3. Click "Encode to Base58"')
    print("4. Copy the result for Phantom")


def print_import_instructions(private_key: str, config: Dict[str, Any]):
    network = config.get("NETWORK", "devnet").capitalize()

    print("✅ Your private key for Phantom:")
    print(SEPARATOR)
    print(private_key)
    print(SEPARATOR)

    print("\n📱 Import to Phantom:")
    print("1. Open Phantom wallet")
    print('2. Click "Import Private Key"')
    print("3. Paste the key above")
    print(f"4. Switch to {network} (Settings → Developer Settings → Change Network → {network})")
    print(f"5. You should see your SOL and {config.get('TOKEN_NAME', 'LearnSolana')} tokens!")

    print("\n⚠️  SECURITY WARNING:")
    print("- Never share this private key")
    print(f"- Only use on {network} (test network)")
    print("- For production, use hardware wallets")


def export_private_key(config_data: Optional[Dict[str, Any]] = None) -> int:
    config = config_data if config_data is not None else load_config()

    try:
        logger.info("🔑 Exporting private key for Phantom wallet...")

        try:
            secret_key = read_secret_key(wallet_path(config))
        except WalletError as e:
            logger.error(f"❌ {e}")
            logger.info("💡 Make sure you have created a wallet first:")
            logger.info(f"   solana-keygen new --outfile {config['WALLET_PATH']} --no-bip39-passphrase")
            return 1

        if len(secret_key) != SECRET_KEY_LENGTH:
            logger.warning(f"⚠️  Secret key has {len(secret_key)} bytes, wallet import expects {SECRET_KEY_LENGTH}")

        try:
            private_key = encode_secret_key(secret_key)
        except (ValueError, TypeError) as e:
            logger.error(f"❌ Error: could not encode secret key: {e}")
            print_manual_conversion(secret_key)
            return 1

        print_import_instructions(private_key, config)
        return 0

    except Exception as e:
        logger.error(f"❌ Error: {e}")
        return 1


def main() -> int:
    config = load_config()
    setup_logging(config)
    return export_private_key(config)


if __name__ == "__main__":
    sys.exit(main())
