# Filename: spl_token_cli.py

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger("spl_token_cli")

# Phrases the CLI/program report when the requested state is already in place
ALREADY_SET_MARKERS = ("already",)


class UpdateOutcome(Enum):
    UPDATED = "updated"
    ALREADY_SET = "already_set"
    FAILED = "failed"


@dataclass
class UpdateResult:
    """Result of one `spl-token update-metadata` call"""
    field: str
    outcome: UpdateOutcome
    detail: str = ""

    @property
    def success(self) -> bool:
        return self.outcome is UpdateOutcome.UPDATED


def classify_failure(output: str) -> UpdateOutcome:
    lowered = output.lower()
    if any(marker in lowered for marker in ALREADY_SET_MARKERS):
        return UpdateOutcome.ALREADY_SET
    return UpdateOutcome.FAILED


class SplTokenCli:
    """
    Thin wrapper around the spl-token binary.
    Only the exit status and the error text of each call are interpreted.
    """

    def __init__(self, binary: str = "spl-token", rpc_url: Optional[str] = None,
                 keypair_path: Optional[str] = None, runner: Callable = subprocess.run):
        self.binary = binary
        self.rpc_url = rpc_url
        self.keypair_path = keypair_path
        self.runner = runner

    @classmethod
    def from_config(cls, config: dict, keypair_path: Optional[str] = None, runner: Callable = subprocess.run):
        return cls(
            binary=config.get("SPL_TOKEN_BIN", "spl-token"),
            rpc_url=config.get("RPC_HTTP_ENDPOINT"),
            keypair_path=keypair_path,
            runner=runner,
        )

    def _network_args(self) -> List[str]:
        return ["--url", self.rpc_url] if self.rpc_url else []

    def _signer_args(self) -> List[str]:
        if not self.keypair_path:
            return []
        return ["--authority", self.keypair_path, "--fee-payer", self.keypair_path]

    def is_available(self) -> bool:
        try:
            result = self.runner([self.binary, "--version"], capture_output=True, text=True, check=False)
        except OSError:
            return False
        return result.returncode == 0

    def update_metadata(self, mint: str, field: str, value: str) -> UpdateResult:
        cmd = [self.binary, "update-metadata", mint, field, value]
        cmd.extend(self._signer_args())
        cmd.extend(self._network_args())
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = self.runner(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            return UpdateResult(field, UpdateOutcome.FAILED, str(e))

        if result.stdout:
            sys.stdout.write(result.stdout)
        if result.stderr:
            sys.stderr.write(result.stderr)

        if result.returncode == 0:
            return UpdateResult(field, UpdateOutcome.UPDATED)

        detail = (result.stderr or "").strip() or (result.stdout or "").strip() or f"exit status {result.returncode}"
        return UpdateResult(field, classify_failure(detail), detail)

    def display(self, mint: str) -> bool:
        """Print the on-chain mint state; output goes straight to the terminal."""
        cmd = [self.binary, "display", mint]
        cmd.extend(self._network_args())
        try:
            result = self.runner(cmd, check=False)
        except OSError as e:
            logger.debug(f"spl-token display failed: {e}")
            return False
        return result.returncode == 0
