import pytest
from pydantic import ValidationError, parse_obj_as

from arranger.models import MetadataClaim, MonthlyMerkleTree, NestedDict, TokenClaim

PROOF = ["0x" + "12" * 32, "0x" + "34" * 32]


@pytest.fixture
def claim() -> dict:
    return {
        "accountIndex": 3,
        "windowIndex": 1,
        "amount": "123456789012345678901234567890",
        "metadata": {"reason": "Rewards for 2023-4"},
        "proof": PROOF,
    }


def test_amount_is_kept_as_string(claim: dict):
    parsed = parse_obj_as(MetadataClaim, claim)

    # larger than any float can represent exactly
    assert parsed.amount == "123456789012345678901234567890"
    assert parsed.to_json() == claim


@pytest.mark.parametrize("amount", ["-1", "1.5", "1e18", "", "0xff", "²", "١٢٣", 100])
def test_invalid_amount(claim: dict, amount):
    claim["amount"] = amount
    with pytest.raises(ValidationError):
        parse_obj_as(MetadataClaim, claim)


def test_invalid_proof(claim: dict):
    claim["proof"] = ["not a hash"]
    with pytest.raises(ValidationError, match="not a hex string"):
        parse_obj_as(MetadataClaim, claim)


def test_proof_order_is_kept(claim: dict):
    claim["proof"] = list(reversed(PROOF))
    assert parse_obj_as(MetadataClaim, claim).proof == list(reversed(PROOF))


def test_token_claim_only_serializes_given_fields():
    raw = {
        "accountIndex": 0,
        "windowIndex": 2,
        "amount": "1000",
        "tax": "10",
        "proof": PROOF,
    }
    parsed = parse_obj_as(TokenClaim, raw)

    assert parsed.tax == "10"
    assert parsed.pro_rata is None
    assert parsed.to_json() == raw


def test_token_claim_invalid_breakdown():
    with pytest.raises(ValidationError):
        parse_obj_as(
            TokenClaim,
            {
                "accountIndex": 0,
                "windowIndex": 2,
                "amount": "1000",
                "redistributed_total": "ten",
                "proof": PROOF,
            },
        )


def test_nested_dict_branch():
    d = NestedDict()
    d.branch("0xabc").branch("veAUXO")["2023-3"] = 1
    d.branch("0xabc").branch("veAUXO")["2023-4"] = 2
    d.branch("0xabc").branch("xAUXO")["2023-3"] = 3

    assert d == {"0xabc": {"veAUXO": {"2023-3": 1, "2023-4": 2}, "xAUXO": {"2023-3": 3}}}
    assert list(d["0xabc"]["veAUXO"].keys()) == ["2023-3", "2023-4"]
    assert isinstance(d.branch("0xabc"), NestedDict)


@pytest.mark.parametrize(
    "field, value",
    [
        ["accountIndex", 1.7],
        ["accountIndex", "3"],
        ["windowIndex", "1"],
        ["windowIndex", False],
        ["proof", [123]],
        ["proof", "0x" + "12" * 32],
    ],
)
def test_values_are_not_coerced(claim: dict, field, value):
    claim[field] = value
    with pytest.raises(ValidationError, match=field):
        parse_obj_as(MetadataClaim, claim)


@pytest.mark.parametrize(
    "field", ["tax", "redistributed_total", "pro_rata", "redistributed_to_stakers"]
)
def test_token_claim_breakdown_must_be_strings(field):
    with pytest.raises(ValidationError, match=field):
        parse_obj_as(
            TokenClaim,
            {
                "accountIndex": 0,
                "windowIndex": 2,
                "amount": "1000",
                field: 10,
                "proof": PROOF,
            },
        )


def test_merkle_root_must_be_a_string():
    with pytest.raises(ValidationError, match="merkleRoot"):
        parse_obj_as(
            MonthlyMerkleTree, {"merkleRoot": 0, "windowIndex": 0, "claims": {}}
        )


def test_to_json_keeps_input_key_order(claim: dict):
    # metadata ahead of the declared fields, plus an extra key in the middle
    ordered = {
        "metadata": {"note": "late claim", "reason": "Rewards for 2023-4"},
        "proof": PROOF,
        "source": "manual",
        "amount": claim["amount"],
        "windowIndex": 1,
        "accountIndex": 3,
    }

    out = parse_obj_as(MetadataClaim, ordered).to_json()

    assert list(out.keys()) == list(ordered.keys())
    assert list(out["metadata"].keys()) == ["note", "reason"]
    assert out == ordered
