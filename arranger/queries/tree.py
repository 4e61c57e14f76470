from typing import NamedTuple, Optional

from arranger.models import Config
from arranger.queries.common import extract_nested_graphql, graphql_query

REPORTS_EXPRESSION = "HEAD:reports"


class TreeFile(NamedTuple):
    name: str
    text: str


class TreeEntry(NamedTuple):
    """A month directory and the files directly inside it"""

    name: str
    files: list[TreeFile]


REPORTS_TREE_QUERY = """
    query RepoFiles($owner: String!, $name: String!, $expression: String!) {
        repository(owner: $owner, name: $name) {
            object(expression: $expression) {
                ... on Tree {
                    entries {
                        name
                        type
                        object {
                            ... on Tree {
                                entries {
                                    name
                                    object {
                                        ... on Blob {
                                            text
                                        }
                                    }
                                }
                            }
                        }
                    }
                }
            }
        }
    }
"""


def parse_tree_entries(entries: Optional[list[dict]]) -> list[TreeEntry]:
    """
    Flatten the raw graphql entries into (directory, [(file, text)]).
    Top level blobs are skipped, as are binary or oversized files that come back without text.
    """
    tree: list[TreeEntry] = []
    for entry in entries or []:
        if entry.get("type") != "tree" or not entry.get("object"):
            continue

        files = [
            TreeFile(name=f["name"], text=f["object"]["text"])
            for f in entry["object"].get("entries", [])
            if f.get("object") and f["object"].get("text") is not None
        ]
        tree.append(TreeEntry(name=entry["name"], files=files))
    return tree


def get_reports_tree(
    conf: Config, expression: str = REPORTS_EXPRESSION
) -> list[TreeEntry]:
    """
    Fetch every month directory under `reports` on the default branch head,
    along with the full text of the files inside, in a single query.
    """
    variables = {"owner": conf.owner, "name": conf.repo, "expression": expression}
    response = graphql_query(conf, dict(query=REPORTS_TREE_QUERY, variables=variables))

    reports = extract_nested_graphql(response, ["repository", "object"])

    # the directory doesn't exist yet
    if reports is None:
        return []

    return parse_tree_entries(reports.get("entries"))
