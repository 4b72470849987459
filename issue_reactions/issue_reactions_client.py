"""Client for GitHub's Reactions API on issues.

See https://docs.github.com/rest/reactions/reactions for the endpoints.
"""

import logging
from typing import Tuple

from . import api_urls
from .api_connection import ApiConnection
from .api_urls import RepositoryId, RepositoryName, RepositoryRef
from .ensure import argument_not_null, argument_not_null_or_empty_string
from .models import ApiOptions, NewReaction, Reaction


def _as_new_reaction(reaction) -> NewReaction:
    if isinstance(reaction, NewReaction):
        return reaction
    # NewReaction raises ArgumentError for unknown kinds
    return NewReaction(reaction)


class ApiClient:
    """Base class for resource clients sharing one ApiConnection."""

    def __init__(self, api_connection: ApiConnection):
        argument_not_null(api_connection, 'api_connection')
        self.api_connection = api_connection


class IssueReactionsClient(ApiClient):
    """Lists, creates and deletes reactions on a single issue.

    Each operation can address the repository by owner and name or by its
    numeric id.
    """

    def get_all(self, owner: str, name: str, issue_number: int,
                options: ApiOptions = ApiOptions.NONE) -> Tuple[Reaction, ...]:
        """Get all reactions for an issue.

        Args:
            owner: The owner of the repository
            name: The name of the repository
            issue_number: The issue number
            options: Options for changing the API response

        Returns:
            The reactions in server order, empty if there are none
        """
        argument_not_null_or_empty_string(owner, 'owner')
        argument_not_null_or_empty_string(name, 'name')
        argument_not_null(options, 'options')

        return self._get_all(RepositoryName(owner, name), issue_number, options)

    def get_all_for_repository(self, repository_id: int, issue_number: int,
                               options: ApiOptions = ApiOptions.NONE) -> Tuple[Reaction, ...]:
        """Get all reactions for an issue in the repository with the given id.

        Args:
            repository_id: The id of the repository
            issue_number: The issue number
            options: Options for changing the API response
        """
        argument_not_null(options, 'options')

        return self._get_all(RepositoryId(repository_id), issue_number, options)

    def create(self, owner: str, name: str, issue_number: int, reaction: NewReaction) -> Reaction:
        """Create a reaction on an issue.

        Args:
            owner: The owner of the repository
            name: The name of the repository
            issue_number: The issue number
            reaction: The reaction to create, or its ReactionType or content string

        Returns:
            The created reaction, including its server-assigned id
        """
        argument_not_null_or_empty_string(owner, 'owner')
        argument_not_null_or_empty_string(name, 'name')
        argument_not_null(reaction, 'reaction')
        reaction = _as_new_reaction(reaction)

        return self._create(RepositoryName(owner, name), issue_number, reaction)

    def create_for_repository(self, repository_id: int, issue_number: int,
                              reaction: NewReaction) -> Reaction:
        """Create a reaction on an issue in the repository with the given id."""
        argument_not_null(reaction, 'reaction')
        reaction = _as_new_reaction(reaction)

        return self._create(RepositoryId(repository_id), issue_number, reaction)

    def delete(self, owner: str, name: str, issue_number: int, reaction_id: int) -> None:
        """Delete a reaction from an issue.

        Args:
            owner: The owner of the repository
            name: The name of the repository
            issue_number: The issue number
            reaction_id: The reaction id
        """
        argument_not_null_or_empty_string(owner, 'owner')
        argument_not_null_or_empty_string(name, 'name')

        self._delete(RepositoryName(owner, name), issue_number, reaction_id)

    def delete_for_repository(self, repository_id: int, issue_number: int, reaction_id: int) -> None:
        """Delete a reaction from an issue in the repository with the given id."""
        self._delete(RepositoryId(repository_id), issue_number, reaction_id)

    def _get_all(self, ref: RepositoryRef, issue_number: int, options: ApiOptions) -> Tuple[Reaction, ...]:
        return self.api_connection.get_all(
            api_urls.issue_reactions(ref, issue_number), None, options, parse=Reaction.from_dict)

    def _create(self, ref: RepositoryRef, issue_number: int, reaction: NewReaction) -> Reaction:
        logging.info(f"Adding '{reaction.content.value}' reaction to issue #{issue_number}")
        return self.api_connection.post(
            api_urls.issue_reactions(ref, issue_number), reaction.to_payload(), parse=Reaction.from_dict)

    def _delete(self, ref: RepositoryRef, issue_number: int, reaction_id: int) -> None:
        logging.info(f"Deleting reaction {reaction_id} from issue #{issue_number}")
        self.api_connection.delete(api_urls.issue_reaction(ref, issue_number, reaction_id))
