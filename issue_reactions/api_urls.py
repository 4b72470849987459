"""Canonical GitHub API paths for the reactions resources.

A repository can be addressed two ways, by owner and name or by its numeric
id. Both forms are represented by ``RepositoryRef`` so every path builder
below handles them in one place.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RepositoryName:
    """A repository addressed by ``owner/name``."""
    owner: str
    name: str


@dataclass(frozen=True)
class RepositoryId:
    """A repository addressed by its numeric id."""
    id: int


RepositoryRef = Union[RepositoryName, RepositoryId]


def repository_path(ref: RepositoryRef) -> str:
    """Return the base path of a repository.

    Args:
        ref: Either address form

    Returns:
        ``/repos/{owner}/{name}`` or ``/repositories/{id}``
    """
    if isinstance(ref, RepositoryName):
        return f"/repos/{ref.owner}/{ref.name}"
    if isinstance(ref, RepositoryId):
        return f"/repositories/{ref.id}"
    raise TypeError(f"Unsupported repository reference: {ref!r}")


def issue_reactions(ref: RepositoryRef, issue_number: int) -> str:
    """Path listing (GET) or creating (POST) reactions on an issue."""
    return f"{repository_path(ref)}/issues/{issue_number}/reactions"


def issue_reaction(ref: RepositoryRef, issue_number: int, reaction_id: int) -> str:
    """Path of a single reaction on an issue, used for DELETE."""
    return f"{issue_reactions(ref, issue_number)}/{reaction_id}"
