import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

from arranger.models import Config

STUBS = Path(__file__).parent / "stubs"
REPORTS = STUBS / "reports"


@pytest.fixture
def config() -> Config:
    return Config(owner="AuxoDAO", repo="auxo-rewards", token="ghp_test", branch="main")


@pytest.fixture()
def ADDRESSES():
    return [
        "0x9bc33f6155eFAcc290c3C50E9B5b24b668562732",
        "0xfDe38ad4bBbeC867e6cb4Bb31FbFB2074c959A83",
        "0x8BB4C0b502f869af3B25166930507a6E8c3038D4",
        "0x7Ac54A0406FA2B465E0D57C66597BE83A4b149fC",
    ]


@dataclass
class MockResponse:
    res: Optional[dict[str, Any]]
    status_code: int = 200
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        return self.res

    def raise_for_status(self):
        if not self.ok:
            raise Exception(f"{self.status_code} Error")


@dataclass
class MockSession:
    """
    Records every request and replies with the next canned response for that method + endpoint
    """

    responses: dict[tuple[str, str], MockResponse]
    calls: list[tuple[str, str, Optional[dict]]] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    closed: bool = False

    def request(self, method: str, url: str, json=None, timeout=None) -> MockResponse:
        endpoint = url.split("/repos/AuxoDAO/auxo-rewards/")[-1]
        self.calls.append((method, endpoint, json))
        return self.responses[(method, endpoint)]

    def close(self) -> None:
        self.closed = True


def count_user_claims(by_user: dict, depth: int) -> int:
    """
    Number of claims in a user index. `depth` is the number of keys leading to a claim:
    2 for user -> month, 3 for user -> token -> month
    """
    if depth == 1:
        return len(by_user)
    return sum(count_user_claims(v, depth - 1) for v in by_user.values())


def reports_entries(root: Path = REPORTS) -> list[dict]:
    """Builds the raw graphql `entries` for the stub reports directory"""
    entries = []
    for month in sorted(root.iterdir()):
        entries.append(
            {
                "name": month.name,
                "type": "tree",
                "object": {
                    "entries": [
                        {"name": f.name, "object": {"text": f.read_text()}}
                        for f in sorted(month.iterdir())
                    ]
                },
            }
        )
    return entries


def reports_response(entries: Optional[list[dict]] = None) -> dict:
    if entries is None:
        entries = reports_entries()
    return {"data": {"repository": {"object": {"entries": entries}}}}


def mock_reports_query(monkeypatch, response: Optional[dict] = None) -> None:
    monkeypatch.setattr(
        "arranger.queries.common.requests.post",
        lambda url, json, headers, timeout: MockResponse(
            reports_response() if response is None else response
        ),
    )


LIVE_CALLS_DISABLED = os.environ.get("PYTEST_LIVE_CALLS_ENABLED") != "TRUE"
SKIP_REASON = (
    "API Calls disabled: set PYTEST_LIVE_CALLS_ENABLED=TRUE in .env to run this test"
)
