from typing import Any, NamedTuple, Optional

from arranger.github import GitHub, file_entry
from arranger.models import Config, Writer

COMMIT_MESSAGE = "**GENERATED** Arrange Rewards by User"


class PublishResult(NamedTuple):
    path: str
    blob: str
    tree: str
    commit: str
    parent: str


def publish(
    conf: Config, data: Any, path: str, github: Optional[GitHub] = None
) -> PublishResult:
    """
    Commit `data` as pretty printed JSON at `path` on top of `conf.branch`.

    Each step depends on the sha returned by the one before it, so the calls are strictly sequential.
    The branch only moves in the final step: if anything fails earlier the branch is untouched
    and at worst we leave an orphaned blob/tree/commit behind.
    """
    if github is None:
        with GitHub(conf) as gh:
            return publish(conf, data, path, gh)
    gh = github

    # latest commit on the branch we want to append to
    parent = gh.get_ref(conf.ref)

    blob = gh.create_blob(Writer.serialize(data), "utf-8")
    print(f"📦 Created blob {blob} for {path}")

    # layered on the branch tip, so every other file is kept as is
    tree = gh.create_tree([file_entry(path, blob)], base_tree=parent)

    commit = gh.create_commit(COMMIT_MESSAGE, tree, [parent])

    # fast-forward only, a concurrent push to the branch makes this fail loudly
    gh.update_ref(conf.ref, commit, force=False)
    print(f"🚀 Committed {commit} to {conf.ref} (parent {parent})")

    return PublishResult(path=path, blob=blob, tree=tree, commit=commit, parent=parent)
