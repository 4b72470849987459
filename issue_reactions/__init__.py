"""GitHub Issue Reactions - A client for reactions on GitHub issues."""

from .ensure import ArgumentError
from .models import ApiOptions, NewReaction, Reaction, ReactionType, User
from .api_urls import RepositoryId, RepositoryName
from .api_connection import ApiConnection
from .issue_reactions_client import ApiClient, IssueReactionsClient
from .config import ClientConfig
from .output import ReactionFormatter

__all__ = [
    'ArgumentError',
    'ApiOptions',
    'NewReaction',
    'Reaction',
    'ReactionType',
    'User',
    'RepositoryId',
    'RepositoryName',
    'ApiConnection',
    'ApiClient',
    'IssueReactionsClient',
    'ClientConfig',
    'ReactionFormatter',
]
