from typing import Optional

import eth_utils as eth
from pydantic import (
    BaseModel,
    Extra,
    PrivateAttr,
    StrictInt,
    StrictStr,
    validator,
)


def validate_big_number(value: str) -> str:
    # isdigit alone accepts unicode digits such as "²"
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Expected a positive integer string, got {value!r}")
    return value


class PassThroughModel(BaseModel):
    """
    Serializes back to exactly the keys it was given, in the order they were given,
    so the committed file reads like the source files.
    """

    _key_order: list[str] = PrivateAttr(default_factory=list)

    class Config:
        # extra keys are passed through to the user index untouched
        extra = Extra.allow

    def __init__(self, **data):
        super().__init__(**data)
        self._key_order = list(data)

    def to_json(self) -> dict:
        out = {}
        for key in self._key_order:
            value = getattr(self, key)
            out[key] = value.to_json() if isinstance(value, PassThroughModel) else value
        return out


class Claim(PassThroughModel):
    """
    A single recipient's entry in a merkle tree
    :param `accountIndex`: unique index of the claim within a window
    :param `windowIndex`: distribution index the claim belongs to
    :param `amount`: reward in wei, kept as a string so precision is never lost
    :param `proof`: merkle inclusion proof, in order

    Strict types: a number where a string is expected (or the reverse) is rejected
    rather than converted.
    """

    accountIndex: StrictInt
    windowIndex: StrictInt
    amount: StrictStr
    proof: list[StrictStr]

    @validator("amount")
    @classmethod
    def check_amount(cls, amount: str) -> str:
        return validate_big_number(amount)

    @validator("proof", each_item=True)
    @classmethod
    def check_proof(cls, node: str) -> str:
        if not eth.is_hex(node):
            raise ValueError(f"Proof element {node!r} is not a hex string")
        return node


class ClaimMetadata(PassThroughModel):
    reason: StrictStr


class MetadataClaim(Claim):
    """Claim from the single `merkle-tree.json` schema, with a reason attached"""

    metadata: ClaimMetadata


class TokenClaim(Claim):
    """
    Claim from the veAUXO/xAUXO schema.
    The amount is broken down into its components rather than described by a reason.
    """

    pro_rata: Optional[StrictStr]
    redistributed_total: Optional[StrictStr]
    redistributed_to_stakers: Optional[StrictStr]
    redistributed_transferred: Optional[StrictStr]
    tax: Optional[StrictStr]

    @validator(
        "redistributed_total",
        "redistributed_to_stakers",
        "redistributed_transferred",
        "tax",
    )
    @classmethod
    def check_breakdown(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else validate_big_number(value)
