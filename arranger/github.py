from dataclasses import dataclass, field
from typing import Any, Literal, Optional, TypedDict

import requests

from arranger.errors import GitHubAPIError
from arranger.models import Config

BlobEncoding = Literal["utf-8", "base64"]


class TreeItem(TypedDict):
    """
    An entry in a new git tree
    :param `mode`: 100644 for a regular file
    :param `sha`: blob the path points at
    """

    path: str
    mode: str
    type: Literal["blob", "tree", "commit"]
    sha: str


def file_entry(path: str, sha: str) -> TreeItem:
    return TreeItem(path=path, mode="100644", type="blob", sha=sha)


@dataclass
class GitHub:
    """
    Thin wrapper over the git data endpoints of the GitHub REST API,
    scoped to one repository. Every method is a single blocking request.
    """

    config: Config
    session: requests.Session = field(default_factory=requests.Session)

    def __post_init__(self) -> None:
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.config.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def __enter__(self) -> "GitHub":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def repo_url(self) -> str:
        return f"{self.config.api_url}/repos/{self.config.owner}/{self.config.repo}"

    def _request(
        self, method: str, endpoint: str, payload: Optional[dict] = None
    ) -> dict[str, Any]:
        response = self.session.request(
            method,
            f"{self.repo_url}/{endpoint}",
            json=payload,
            timeout=self.config.timeout,
        )
        if not response.ok:
            try:
                message = response.json().get("message", response.text)
            except ValueError:
                message = response.text
            raise GitHubAPIError(method, endpoint, response.status_code, message)
        return response.json()

    def get_ref(self, ref: str) -> str:
        """Returns the sha of the commit `ref` (eg: heads/main) points at"""
        res = self._request("GET", f"git/ref/{ref}")
        return res["object"]["sha"]

    def create_blob(self, content: str, encoding: BlobEncoding = "utf-8") -> str:
        res = self._request(
            "POST", "git/blobs", {"content": content, "encoding": encoding}
        )
        return res["sha"]

    def create_tree(self, tree: list[TreeItem], base_tree: Optional[str] = None) -> str:
        payload: dict[str, Any] = {"tree": tree}
        if base_tree:
            payload["base_tree"] = base_tree
        res = self._request("POST", "git/trees", payload)
        return res["sha"]

    def create_commit(self, message: str, tree: str, parents: list[str]) -> str:
        res = self._request(
            "POST",
            "git/commits",
            {"message": message, "tree": tree, "parents": parents},
        )
        return res["sha"]

    def update_ref(self, ref: str, sha: str, force: bool = False) -> str:
        """
        Move `ref` to `sha`. Without `force` GitHub rejects anything that
        isn't a fast-forward with a 422.
        """
        res = self._request("PATCH", f"git/refs/{ref}", {"sha": sha, "force": force})
        return res["object"]["sha"]
