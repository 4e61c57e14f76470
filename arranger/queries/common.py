from copy import deepcopy
from typing import Any, TypedDict, cast

import requests

from arranger.errors import QueryError
from arranger.models import Config, GraphQL_Response


class GraphQLConfig(TypedDict):
    """
    Typechecker for JSON/Dict data to be passed to the GraphQL API
    :param `query`: the query to send
    :param `variables`: injected query params in dictionary format
    """

    query: str
    variables: dict[str, Any]


def extract_nested_graphql(res: GraphQL_Response, access_path: list[str]):
    """
    This function walks through a dictionary until it finds the data you want.

    :param `access_path`: in the format ['first_key', 'nested_key_level0', 'nested_key_level1', ....]
    :param `res`: api response from graphql. First key should be 'data'
    """
    deepcopy_access_path = deepcopy(access_path)
    current = res["data"]
    while len(deepcopy_access_path) > 0:
        current = current[deepcopy_access_path.pop(0)]
    return current


def graphql_query(conf: Config, params: GraphQLConfig) -> GraphQL_Response:
    """
    Send a single authenticated query to the GitHub GraphQL endpoint.
    HTTP failures are raised by requests, GraphQL level failures as `QueryError`
    """
    response = requests.post(
        conf.graphql_url,
        json=params,
        headers={"Authorization": f"bearer {conf.token}"},
        timeout=conf.timeout,
    )
    response.raise_for_status()
    body: GraphQL_Response = response.json()

    if not body:
        raise QueryError(f"No results for graph query to {conf.graphql_url}")
    if "errors" in body:
        raise QueryError(
            f"Error in graph query to {conf.graphql_url}: {cast(dict, body)['errors']}"
        )
    return body
