"""
Unit tests for path construction and the route table
"""

import pytest

from issue_reactions import api_urls
from issue_reactions.api_urls import RepositoryId, RepositoryName
from issue_reactions.routes import ROUTES, route_for


class TestIssueReactionPaths:
    """Test cases for issue reaction paths."""

    def test_list_path_by_name(self):
        path = api_urls.issue_reactions(RepositoryName('octokit', 'octokit.net'), 1)

        assert path == '/repos/octokit/octokit.net/issues/1/reactions'

    def test_list_path_by_id(self):
        path = api_urls.issue_reactions(RepositoryId(1), 42)

        assert path == '/repositories/1/issues/42/reactions'

    def test_single_reaction_path_by_name(self):
        path = api_urls.issue_reaction(RepositoryName('fake', 'repo'), 1, 42)

        assert path == '/repos/fake/repo/issues/1/reactions/42'

    def test_single_reaction_path_by_id(self):
        path = api_urls.issue_reaction(RepositoryId(1), 1, 42)

        assert path == '/repositories/1/issues/1/reactions/42'

    def test_paths_are_deterministic(self):
        ref = RepositoryName('octokit', 'octokit.net')

        assert api_urls.issue_reactions(ref, 1) == api_urls.issue_reactions(RepositoryName('octokit', 'octokit.net'), 1)

    def test_unsupported_reference(self):
        with pytest.raises(TypeError):
            api_urls.repository_path('octokit/octokit.net')


class TestRoutes:
    """Test cases for the route table."""

    def test_every_client_operation_has_a_route(self):
        assert set(ROUTES) == {
            'IssueReactionsClient.get_all',
            'IssueReactionsClient.get_all_for_repository',
            'IssueReactionsClient.create',
            'IssueReactionsClient.create_for_repository',
            'IssueReactionsClient.delete',
            'IssueReactionsClient.delete_for_repository',
        }

    def test_methods(self):
        assert route_for('IssueReactionsClient.get_all').method == 'GET'
        assert route_for('IssueReactionsClient.create_for_repository').method == 'POST'
        assert route_for('IssueReactionsClient.delete').method == 'DELETE'

    @pytest.mark.parametrize('operation, values, expected', [
        ('IssueReactionsClient.get_all',
         {'owner': 'fake', 'repo': 'repo', 'issue_number': 1},
         api_urls.issue_reactions(RepositoryName('fake', 'repo'), 1)),
        ('IssueReactionsClient.get_all_for_repository',
         {'id': 1, 'number': 42},
         api_urls.issue_reactions(RepositoryId(1), 42)),
        ('IssueReactionsClient.create',
         {'owner': 'fake', 'repo': 'repo', 'issue_number': 1},
         api_urls.issue_reactions(RepositoryName('fake', 'repo'), 1)),
        ('IssueReactionsClient.create_for_repository',
         {'id': 1, 'number': 42},
         api_urls.issue_reactions(RepositoryId(1), 42)),
        ('IssueReactionsClient.delete',
         {'owner': 'fake', 'repo': 'repo', 'issue_number': 1, 'reaction_id': 42},
         api_urls.issue_reaction(RepositoryName('fake', 'repo'), 1, 42)),
        ('IssueReactionsClient.delete_for_repository',
         {'id': 1, 'issue_number': 13, 'reaction_id': 42},
         api_urls.issue_reaction(RepositoryId(1), 13, 42)),
    ])
    def test_templates_match_built_paths(self, operation, values, expected):
        """Filling a template gives the same path the builders produce."""
        assert route_for(operation).template.format(**values) == expected

    def test_unknown_operation(self):
        with pytest.raises(KeyError):
            route_for('IssueReactionsClient.update')
