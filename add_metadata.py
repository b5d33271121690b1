# Filename: add_metadata.py

import logging
import sys
from typing import Any, Dict, List, Optional

from config import explorer_url, load_config, setup_logging, wallet_path
from spl_token_cli import SplTokenCli, UpdateOutcome, UpdateResult
from token_record import load_record, record_exists, save_record

logger = logging.getLogger("add_metadata")

ERROR_HINTS = [
    "Make sure spl-token CLI is installed",
    "Ensure you have SOL for transaction fees",
    "Check that token was created with metadata extension",
    "Verify you're on the correct network (devnet)",
]

INSTALL_STEPS = [
    "1. Install Rust: curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh -s -- -y",
    "2. Source environment: source ~/.cargo/env",
    "3. Install spl-token: cargo install spl-token-cli",
]

USAGE = """🎨 LearnSolana Metadata Tool
═══════════════════════════════════
Usage:
  python add_metadata.py                    # Add name and symbol
  python add_metadata.py [image-url]        # Add name, symbol, and image
  python add_metadata.py display            # Show current metadata
  python add_metadata.py help               # Show this help

Examples:
  python add_metadata.py
  python add_metadata.py "https://github.com/user/repo/raw/main/icon.png"
  python add_metadata.py display"""

DISPLAY_ACTIONS = ("display", "show")
HELP_ACTIONS = ("help", "--help", "-h")


def _report_update(label: str, result: UpdateResult):
    if result.outcome is UpdateOutcome.UPDATED:
        logger.info(f"✅ Token {label} added successfully!")
    elif result.outcome is UpdateOutcome.ALREADY_SET:
        logger.warning(f"⚠️  Token {label} is already set, continuing...")
        logger.debug(result.detail)
    else:
        logger.warning(f"⚠️  Failed to set token {label}, continuing: {result.detail}")


def add_token_metadata(image_url: Optional[str] = None, config_data: Optional[Dict[str, Any]] = None,
                       cli: Optional[SplTokenCli] = None) -> int:
    config = config_data if config_data is not None else load_config()
    info_file = config["TOKEN_INFO_FILE"]

    try:
        logger.info("🎨 Adding metadata to token...")

        if not record_exists(info_file):
            logger.error("❌ Token info file not found!")
            logger.info("💡 Please run create_token.py first to create your token.")
            return 1

        record = load_record(info_file)
        logger.info(f"👛 Wallet: {record.owner}")
        logger.info(f"🪙 Token Mint: {record.mint}")

        if cli is None:
            cli = SplTokenCli.from_config(config, keypair_path=wallet_path(config))

        if not cli.is_available():
            logger.error("❌ spl-token CLI not found!")
            logger.info("\n💡 Install spl-token CLI first:")
            for step in INSTALL_STEPS:
                logger.info(step)
            return 1

        results: List[UpdateResult] = []

        logger.info("📝 Step 1: Adding token name...")
        results.append(cli.update_metadata(record.mint, "name", record.name))
        _report_update("name", results[-1])

        logger.info("📝 Step 2: Adding token symbol...")
        results.append(cli.update_metadata(record.mint, "symbol", record.symbol))
        _report_update("symbol", results[-1])

        if image_url:
            logger.info("📝 Step 3: Adding token image...")
            logger.info(f"🖼️  Image URL: {image_url}")
            uri_result = cli.update_metadata(record.mint, "uri", image_url)
            results.append(uri_result)
            if uri_result.success:
                logger.info("✅ Token image added successfully!")
                record.set_image(image_url)
                save_record(info_file, record)
            else:
                logger.error(f"❌ Failed to add image: {uri_result.detail}")
        else:
            logger.info("💡 To add an image, run:")
            logger.info('   python add_metadata.py "https://your-image-url.com/image.png"')

        failures = [r for r in results if r.outcome is UpdateOutcome.FAILED]
        if failures:
            logger.warning(f"\n⚠️  Metadata update finished with {len(failures)} failed field(s): "
                           f"{', '.join(r.field for r in failures)}")
        else:
            logger.info("\n🎉 SUCCESS! Metadata updated!")

        logger.info(f"\n📊 Your {record.name} token now has:")
        logger.info(f"   🏷️  Name: {record.name}")
        logger.info(f"   🔤 Symbol: {record.symbol}")
        if image_url:
            logger.info("   🖼️  Image: Custom icon")

        logger.info("\n🔍 Check your token:")
        logger.info(f"   {explorer_url(record.mint, record.network)}")

        logger.info("\n📱 Import to Phantom:")
        logger.info("   1. Run: python export_private_key.py")
        logger.info("   2. Copy the private key")
        logger.info("   3. Import to Phantom wallet")
        logger.info(f"   4. Switch to {record.network.capitalize()}")
        logger.info(f"   5. See your {record.name} tokens!")

        return 1 if failures else 0

    except Exception as e:
        logger.error(f"❌ Error adding metadata: {e}")
        logger.info("\n💡 Common solutions:")
        for hint in ERROR_HINTS:
            logger.info(f"   - {hint}")
        return 1


def display_metadata(config_data: Optional[Dict[str, Any]] = None, cli: Optional[SplTokenCli] = None) -> int:
    config = config_data if config_data is not None else load_config()
    info_file = config["TOKEN_INFO_FILE"]

    if not record_exists(info_file):
        logger.error("❌ No token info found. Create a token first!")
        return 1

    try:
        record = load_record(info_file)

        logger.info("📊 Current Token Information:")
        logger.info("═══════════════════════════════════════")
        logger.info(f"🏷️  Name: {record.name}")
        logger.info(f"🔤 Symbol: {record.symbol}")
        logger.info(f"🏭 Mint: {record.mint}")
        logger.info(f"📦 Supply: {record.supply} tokens")
        logger.info(f"🌐 Network: {record.network}")
        if record.image_url:
            logger.info(f"🖼️  Image: {record.image_url}")

        logger.info("\n🔍 Check on-chain metadata:")
        if cli is None:
            cli = SplTokenCli.from_config(config)
        if not cli.display(record.mint):
            logger.info("💡 Install spl-token CLI to see on-chain metadata")
        return 0

    except Exception as e:
        logger.error(f"❌ Error reading token info: {e}")
        return 1


def print_usage():
    print(USAGE)


def parse_action(argv: Optional[List[str]] = None) -> Optional[str]:
    args = sys.argv[1:] if argv is None else argv
    return args[0] if args else None


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    setup_logging(config)
    action = parse_action(argv)

    if action in DISPLAY_ACTIONS:
        return display_metadata(config)
    if action in HELP_ACTIONS:
        print_usage()
        return 0
    if action is None:
        return add_token_metadata(None, config)
    if action.startswith("http"):
        return add_token_metadata(action, config)

    logger.error(f"❌ Unknown argument: {action}")
    print_usage()
    return 2


if __name__ == "__main__":
    sys.exit(main())
