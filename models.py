# Filename: models.py

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

RECORD_SCHEMA_VERSION = 1


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class TokenRecord:
    """
    TokenRecord is the persisted description of a token created by create_token.py.
    It is written to the token info file and later read (and partially updated)
    by add_metadata.py. Field names map to camelCase keys in the JSON file.
    """
    name: str                          # Token name
    symbol: str                        # Token symbol (short name)
    mint: str                          # Mint address
    token_account: str                 # Owner's associated token account
    owner: str                         # Wallet that pays and holds all authorities
    supply: int                        # Whole tokens minted
    decimals: int
    network: str                       # Cluster label (e.g. 'devnet')
    created_at: str
    target_price: str = "$1.00"
    total_value: str = "$100.00"
    program: str = "TOKEN_2022"
    metadata_ready: bool = True
    image_url: Optional[str] = None
    updated_at: Optional[str] = None
    schema_version: int = RECORD_SCHEMA_VERSION

    def set_image(self, image_url: str):
        self.image_url = image_url
        self.updated_at = utc_timestamp()

    def to_dict(self) -> dict:
        data = {
            "schemaVersion": self.schema_version,
            "name": self.name,
            "symbol": self.symbol,
            "mint": self.mint,
            "tokenAccount": self.token_account,
            "owner": self.owner,
            "supply": self.supply,
            "decimals": self.decimals,
            "targetPrice": self.target_price,
            "totalValue": self.total_value,
            "program": self.program,
            "metadataReady": self.metadata_ready,
            "network": self.network,
            "createdAt": self.created_at,
        }
        if self.image_url is not None:
            data["imageUrl"] = self.image_url
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "TokenRecord":
        return cls(
            name=data["name"],
            symbol=data["symbol"],
            mint=data["mint"],
            token_account=data["tokenAccount"],
            owner=data["owner"],
            supply=data["supply"],
            decimals=data["decimals"],
            network=data["network"],
            created_at=data["createdAt"],
            target_price=data.get("targetPrice", "$1.00"),
            total_value=data.get("totalValue", "$100.00"),
            program=data.get("program", "TOKEN_2022"),
            metadata_ready=data.get("metadataReady", True),
            image_url=data.get("imageUrl"),
            updated_at=data.get("updatedAt"),
            schema_version=data.get("schemaVersion", RECORD_SCHEMA_VERSION),
        )