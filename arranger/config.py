from arranger.env import action_input, optional_env_var
from arranger.models import Config


def load_conf() -> Config:
    """
    Builds the run config from the action inputs.
    All four inputs are required; the API endpoints default to github.com
    unless the runner says otherwise (eg: GitHub Enterprise).
    """
    overrides = {
        key: value
        for key, value in {
            "api_url": optional_env_var("GITHUB_API_URL"),
            "graphql_url": optional_env_var("GITHUB_GRAPHQL_URL"),
        }.items()
        if value
    }

    return Config(
        owner=action_input("owner"),
        repo=action_input("repo"),
        token=action_input("token"),
        branch=action_input("branch"),
        **overrides,
    )
