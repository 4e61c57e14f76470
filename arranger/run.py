import sys
from typing import Any, Callable, NamedTuple, Optional

import fire

from arranger.arrange import (
    arrange_by_user,
    arrange_tokens_by_user,
    build_monthly_index,
    build_token_index,
    count_claims,
    user_index_to_json,
)
from arranger.config import load_conf
from arranger.models import Config, Writer
from arranger.publish import publish
from arranger.queries import TreeEntry, get_reports_tree


class Pipeline(NamedTuple):
    """How one layout of merkle trees is indexed, pivoted and where it is written"""

    build_index: Callable[[list[TreeEntry]], dict]
    arrange: Callable[[Any], dict]
    output_path: str


PIPELINES: dict[str, Pipeline] = {
    "monthly": Pipeline(
        build_monthly_index, arrange_by_user, "reports/merkle-trees-by-user.json"
    ),
    "token": Pipeline(
        build_token_index,
        arrange_tokens_by_user,
        "reports/merkle-trees-by-user-v2.json",
    ),
}


def escape_command(message: str) -> str:
    """Workflow commands are line based, so newlines have to be encoded"""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    print(f"::error::{escape_command(message)}")


def run(conf: Config, variant: str = "token", dry_run: bool = False) -> dict:
    """
    Fetch the month directories, pivot the merkle trees to be keyed by user,
    then commit the result to the branch (or write it locally on a dry run).
    Returns the json serializable user index.
    """
    pipeline = PIPELINES[variant]

    entries = get_reports_tree(conf)
    print(f"📂 Found {len(entries)} month directories in {conf.owner}/{conf.repo}")

    index = pipeline.build_index(entries)
    by_user = user_index_to_json(pipeline.arrange(index))
    print(
        f"🧮 Arranged {count_claims(index)} claims from {len(index)} months for {len(by_user)} users"
    )

    if dry_run:
        path = Writer().to_json(by_user, pipeline.output_path)
        print(f"😃 Dry run, wrote {path}")
    else:
        publish(conf, by_user, pipeline.output_path)

    return by_user


def main(variant: str = "token", dry_run: bool = False) -> None:
    """
    Entry point for the action. Any error, whatever the source, fails the run
    with its message and a non-zero exit code.
    """
    try:
        if variant not in PIPELINES:
            raise ValueError(
                f"Unknown variant {variant}, expected one of {list(PIPELINES)}"
            )
        conf = load_conf()
        run(conf, variant, dry_run)
    except Exception as e:
        set_failed(str(e))
        sys.exit(1)


def cli(argv: Optional[list[str]] = None) -> None:
    """`python -m arranger.run [monthly|token] [--dry_run]`, token by default"""
    fire.Fire(main, command=argv)


if __name__ == "__main__":
    cli()
