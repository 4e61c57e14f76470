class MissingEnvironmentVariableException(Exception):
    pass


class BadConfigException(Exception):
    pass


class QueryError(Exception):
    """Raise if GraphQL Query returns no results or an error payload"""

    pass


class RewardFileParseError(Exception):
    """Raise if a merkle tree file cannot be parsed into a reward file"""

    def __init__(self, month: str, filename: str, reason: str):
        self.month = month
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not parse {month}/{filename}: {reason}")


class GitHubAPIError(Exception):
    """Raise if a call to the GitHub REST API returns a non-2xx status"""

    def __init__(self, method: str, endpoint: str, status: int, message: str = ""):
        self.method = method
        self.endpoint = endpoint
        self.status = status
        super().__init__(f"{method} {endpoint} failed with {status}: {message}")
