"""
Configuration for the LearnSolana token tools
"""

import os
import sys
import json
import logging
from typing import Dict, Any, Optional

from loguru import logger as loguru_logger

logger = logging.getLogger("config")

CONFIG_FILE = "config.json"

# Default configuration
DEFAULT_CONFIG = {
    # Wallet
    "WALLET_PATH": os.path.join("~", "livestream-wallet.json"),

    # RPC
    "RPC_HTTP_ENDPOINT": "https://api.devnet.solana.com",
    "COMMITMENT": "confirmed",
    "NETWORK": "devnet",

    # Token
    "TOKEN_NAME": "LearnSolana",
    "TOKEN_SYMBOL": "LEARN",
    "TOKEN_DECIMALS": 9,
    "TOKEN_SUPPLY": 100,
    "TARGET_PRICE_USD": 1.0,

    # Files & tools
    "TOKEN_INFO_FILE": "learnsolana-info.json",
    "SPL_TOKEN_BIN": "spl-token",

    # System
    "LOG_LEVEL": "INFO",
}


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load the configuration from config.json, or from the environment
    when USE_ENV_CONFIG=true. A missing file means defaults.

    Returns:
        Configuration dictionary
    """
    if os.environ.get("USE_ENV_CONFIG", "").lower() == "true":
        logger.debug("Loading configuration from environment variables")
        config = load_config_from_env()
    elif not os.path.exists(config_file):
        config = dict(DEFAULT_CONFIG)
    else:
        try:
            with open(config_file, "r") as f:
                config = json.load(f)
            logger.debug(f"Configuration loaded from: {config_file}")
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            logger.info("Using default configuration")
            config = dict(DEFAULT_CONFIG)

    # Fill in missing keys
    for key, value in DEFAULT_CONFIG.items():
        if key not in config:
            config[key] = value

    return config


def load_config_from_env() -> Dict[str, Any]:
    """
    Load the configuration from environment variables

    Returns:
        Configuration dictionary
    """
    config = {}

    for key, default_value in DEFAULT_CONFIG.items():
        env_value = os.environ.get(key)

        if env_value is not None:
            try:
                if isinstance(default_value, bool):
                    config[key] = env_value.lower() == "true"
                elif isinstance(default_value, int):
                    config[key] = int(env_value)
                elif isinstance(default_value, float):
                    config[key] = float(env_value)
                else:
                    config[key] = env_value
            except Exception as parse_err:
                logger.warning(f"Could not parse env variable {key}: {parse_err}. Using default value.")
                config[key] = default_value
        else:
            config[key] = default_value

    return config


def wallet_path(config: Dict[str, Any]) -> str:
    return os.path.expanduser(config["WALLET_PATH"])


def explorer_url(address: str, network: str) -> str:
    return f"https://explorer.solana.com/address/{address}?cluster={network}"


def setup_logging(config: Optional[Dict[str, Any]] = None):
    level = str((config or DEFAULT_CONFIG).get("LOG_LEVEL", "INFO")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = "INFO"
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    # token_record logs through loguru; same stream, format and level
    loguru_logger.remove()
    loguru_logger.add(lambda message: sys.stdout.write(message), format="{message}", level=level)
