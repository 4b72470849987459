"""Data models for GitHub issue reactions."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Union

from .ensure import ArgumentError


class ReactionType(str, Enum):
    """The kinds of reaction GitHub accepts."""
    PLUS_ONE = '+1'
    MINUS_ONE = '-1'
    LAUGH = 'laugh'
    CONFUSED = 'confused'
    HEART = 'heart'
    HOORAY = 'hooray'
    ROCKET = 'rocket'
    EYES = 'eyes'

    @classmethod
    def parse(cls, value: str) -> Union['ReactionType', str]:
        """Parse a server-supplied reaction kind.

        Args:
            value: The raw ``content`` string from the API

        Returns:
            The matching ReactionType, or the raw string if GitHub sent a kind
            this client does not know about yet
        """
        try:
            return cls(value)
        except ValueError:
            logging.warning(f"Unknown reaction content '{value}', keeping raw value")
            return value


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.strptime(value, '%Y-%m-%dT%H:%M:%SZ').replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class User:
    """The user who placed a reaction."""
    id: int
    login: str
    node_id: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'User':
        return cls(
            id=data['id'],
            login=data['login'],
            node_id=data.get('node_id'),
            avatar_url=data.get('avatar_url'),
            html_url=data.get('html_url'),
            type=data.get('type'),
        )


@dataclass(frozen=True)
class Reaction:
    """A single emoji reaction a user placed on an issue."""
    id: int
    user: Optional[User]
    content: Union[ReactionType, str]
    created_at: Optional[datetime] = None
    node_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'Reaction':
        """Build a Reaction from a GitHub API response object.

        Args:
            data: JSON object with ``id``, ``user``, ``content`` and ``created_at``

        Returns:
            The deserialized Reaction
        """
        user = data.get('user')
        return cls(
            id=data['id'],
            user=User.from_dict(user) if user else None,
            content=ReactionType.parse(data['content']),
            created_at=_parse_timestamp(data.get('created_at')),
            node_id=data.get('node_id'),
        )


@dataclass(frozen=True)
class NewReaction:
    """Request payload for creating a reaction."""
    content: ReactionType

    def __post_init__(self):
        if self.content is None:
            raise ArgumentError("'content' cannot be None")
        if not isinstance(self.content, ReactionType):
            try:
                # frozen dataclass, so bypass __setattr__
                object.__setattr__(self, 'content', ReactionType(self.content))
            except ValueError:
                valid = ', '.join(kind.value for kind in ReactionType)
                raise ArgumentError(f"Unknown reaction content '{self.content}' (expected one of: {valid})")

    def to_payload(self) -> Dict[str, str]:
        return {'content': self.content.value}


@dataclass(frozen=True)
class ApiOptions:
    """Pagination options for list operations.

    Attributes:
        page_size: Items per page (sent as ``per_page``)
        start_page: First page to fetch
        page_count: Maximum number of pages to fetch
    """
    page_size: Optional[int] = None
    start_page: Optional[int] = None
    page_count: Optional[int] = None

    def __post_init__(self):
        for field_name in ('page_size', 'start_page', 'page_count'):
            value = getattr(self, field_name)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value < 1):
                raise ArgumentError(f"'{field_name}' must be a positive integer, got {value!r}")


ApiOptions.NONE = ApiOptions()
