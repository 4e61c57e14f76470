from typing import Optional

import eth_utils as eth
from pydantic import BaseModel, Extra, StrictInt, StrictStr, validator

from arranger.models.Claim import Claim, MetadataClaim, TokenClaim
from arranger.models.types import EthereumAddress


class MerkleTree(BaseModel):
    """
    One month of rewards for one token, as produced by the merkle tree generator.
    `claims` is keyed by recipient address exactly as it appears in the file.
    """

    merkleRoot: StrictStr
    windowIndex: StrictInt
    id: Optional[StrictInt]
    rewardToken: Optional[StrictStr]
    totalRewardsDistributed: Optional[StrictStr]
    claims: dict[EthereumAddress, Claim]

    class Config:
        extra = Extra.allow

    @validator("merkleRoot")
    @classmethod
    def check_root(cls, root: str) -> str:
        if not eth.is_hex(root):
            raise ValueError(f"Merkle root {root!r} is not a hex string")
        return root


class MonthlyMerkleTree(MerkleTree):
    claims: dict[EthereumAddress, MetadataClaim]


class TokenMerkleTree(MerkleTree):
    claims: dict[EthereumAddress, TokenClaim]
