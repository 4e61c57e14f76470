"""
Turns the per-month merkle trees under `reports/` into a single index keyed by user.

Two layouts are supported:
- `monthly`: one `merkle-tree.json` per month,
  arranged as user -> month -> claim
- `token`: a `merkle-tree-veAUXO.json` and a `merkle-tree-xAUXO.json` per month,
  arranged as user -> token -> month -> claim
"""

import json
from typing import Type, TypeVar, Union

from pydantic import ValidationError

from arranger.errors import RewardFileParseError
from arranger.models import (
    Claim,
    MerkleTree,
    Month,
    MonthlyMerkleTree,
    NestedDict,
    TokenMerkleTree,
    TokenName,
)
from arranger.queries import TreeEntry

MONTHLY_FILENAME = "merkle-tree.json"

TOKEN_FILENAMES: dict[str, TokenName] = {
    "merkle-tree-veAUXO.json": "veAUXO",
    "merkle-tree-xAUXO.json": "xAUXO",
}

MonthlyIndex = dict[Month, MonthlyMerkleTree]
TokenIndex = dict[Month, dict[TokenName, TokenMerkleTree]]

T = TypeVar("T", bound=MerkleTree)


def parse_merkle_tree(text: str, model: Type[T], month: Month, filename: str) -> T:
    """Parse the raw blob text, failing with the month and file name attached"""
    try:
        return model.parse_obj(json.loads(text))
    except json.JSONDecodeError as e:
        raise RewardFileParseError(month, filename, f"invalid JSON ({e})") from e
    except ValidationError as e:
        raise RewardFileParseError(month, filename, str(e)) from e


def build_monthly_index(entries: list[TreeEntry]) -> MonthlyIndex:
    """
    month -> merkle tree.
    Files that aren't `merkle-tree.json` are ignored, as are months without one.
    """
    index: MonthlyIndex = {}
    for month, files in entries:
        for f in files:
            if f.name == MONTHLY_FILENAME:
                index[month] = parse_merkle_tree(
                    f.text, MonthlyMerkleTree, month, f.name
                )
    return index


def build_token_index(entries: list[TreeEntry]) -> TokenIndex:
    """
    month -> token -> merkle tree.
    A month only appears if it holds at least one of the token files.
    """
    index: TokenIndex = {}
    for month, files in entries:
        for f in files:
            token = TOKEN_FILENAMES.get(f.name)
            if token is None:
                continue
            tree = parse_merkle_tree(f.text, TokenMerkleTree, month, f.name)
            index.setdefault(month, {})[token] = tree
    return index


def arrange_by_user(index: MonthlyIndex) -> NestedDict:
    """
    Pivot month -> user -> claim into user -> month -> claim.

    @example
    arrange_by_user(index)['0x...1234']['2023-4'] => MetadataClaim(accountIndex=1, amount='100000000000000', ...)
    """
    by_user = NestedDict()
    for month, tree in index.items():
        for user, claim in tree.claims.items():
            by_user.branch(user)[month] = claim
    return by_user


def arrange_tokens_by_user(index: TokenIndex) -> NestedDict:
    """
    Pivot month -> token -> user -> claim into user -> token -> month -> claim.
    The same user in both token files for a month lands under two separate token keys.
    """
    by_user = NestedDict()
    for month, trees in index.items():
        for token, tree in trees.items():
            for user, claim in tree.claims.items():
                by_user.branch(user).branch(token)[month] = claim
    return by_user


def user_index_to_json(by_user: Union[NestedDict, Claim]) -> dict:
    """Recursively converts the claims to plain dicts, ready for `json.dumps`"""
    if isinstance(by_user, Claim):
        return by_user.to_json()
    return {k: user_index_to_json(v) for k, v in by_user.items()}


def count_claims(index: Union[MonthlyIndex, TokenIndex]) -> int:
    total = 0
    for month_entry in index.values():
        if isinstance(month_entry, MerkleTree):
            total += len(month_entry.claims)
        else:
            total += sum(len(t.claims) for t in month_entry.values())
    return total
