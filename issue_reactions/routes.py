"""Documented REST routes behind each client operation.

Tooling and tests look routes up here; the client builds its paths through
``api_urls`` and never reads this table.
"""

from typing import Dict, NamedTuple


class Route(NamedTuple):
    method: str
    template: str


ROUTES: Dict[str, Route] = {
    'IssueReactionsClient.get_all': Route(
        'GET', '/repos/{owner}/{repo}/issues/{issue_number}/reactions'),
    'IssueReactionsClient.get_all_for_repository': Route(
        'GET', '/repositories/{id}/issues/{number}/reactions'),
    'IssueReactionsClient.create': Route(
        'POST', '/repos/{owner}/{repo}/issues/{issue_number}/reactions'),
    'IssueReactionsClient.create_for_repository': Route(
        'POST', '/repositories/{id}/issues/{number}/reactions'),
    'IssueReactionsClient.delete': Route(
        'DELETE', '/repos/{owner}/{repo}/issues/{issue_number}/reactions/{reaction_id}'),
    'IssueReactionsClient.delete_for_repository': Route(
        'DELETE', '/repositories/{id}/issues/{issue_number}/reactions/{reaction_id}'),
}


def route_for(operation: str) -> Route:
    """Look up the route of an operation such as ``'IssueReactionsClient.create'``.

    Raises:
        KeyError: If the operation has no documented route
    """
    return ROUTES[operation]
