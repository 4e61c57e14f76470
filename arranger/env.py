import os
from typing import Optional

from dotenv import load_dotenv

from arranger.errors import MissingEnvironmentVariableException

load_dotenv()


def env_var(accessor: str) -> str:
    """
    Attempt to fetch an environment variable and throw
    an error if not found
    """
    var = os.environ.get(accessor)
    if not var:
        raise MissingEnvironmentVariableException(accessor)
    return var


def action_input(name: str) -> str:
    """
    GitHub Actions exposes `with:` inputs as INPUT_<NAME> environment variables.
    Spaces become underscores and the name is upper cased.
    """
    return env_var(f"INPUT_{name.replace(' ', '_').upper()}").strip()


def optional_env_var(accessor: str) -> Optional[str]:
    return os.environ.get(accessor) or None
