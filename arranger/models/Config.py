from pydantic import BaseModel, validator

from arranger.errors import BadConfigException


class Config(BaseModel):
    """
    Inputs for a single run, built once at startup and passed down explicitly
    :param `owner`: account or organisation owning the repository
    :param `repo`: repository holding the `reports` directory
    :param `token`: GitHub token with contents:write on `repo`
    :param `branch`: branch the generated commit is appended to
    """

    owner: str
    repo: str
    token: str
    branch: str

    api_url: str = "https://api.github.com"
    graphql_url: str = "https://api.github.com/graphql"

    # seconds, per request
    timeout: float = 30

    @validator("owner", "repo", "token", "branch")
    @classmethod
    def not_empty(cls, value: str, field) -> str:
        value = value.strip()
        if not value:
            raise BadConfigException(f"{field.name} must not be empty")
        return value

    @validator("branch")
    @classmethod
    def strip_ref_prefix(cls, branch: str) -> str:
        # accept `refs/heads/main` as well as `main`
        for prefix in ("refs/heads/", "heads/"):
            if branch.startswith(prefix):
                branch = branch[len(prefix) :]
                break
        if not branch:
            raise BadConfigException("branch must not be empty")
        return branch

    @validator("api_url", "graphql_url")
    @classmethod
    def strip_trailing_slash(cls, url: str) -> str:
        return url.rstrip("/")

    @validator("timeout")
    @classmethod
    def positive_timeout(cls, timeout: float) -> float:
        if timeout <= 0:
            raise BadConfigException("Timeout must be positive")
        return timeout

    @property
    def ref(self) -> str:
        return f"heads/{self.branch}"
