"""Output formatting and display for issue reactions."""

from collections import Counter
from typing import Dict, Sequence

from .models import Reaction, ReactionType


# ANSI color codes
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'

EMOJI = {
    ReactionType.PLUS_ONE: '👍',
    ReactionType.MINUS_ONE: '👎',
    ReactionType.LAUGH: '😄',
    ReactionType.CONFUSED: '😕',
    ReactionType.HEART: '❤️',
    ReactionType.HOORAY: '🎉',
    ReactionType.ROCKET: '🚀',
    ReactionType.EYES: '👀',
}


def _content_value(content) -> str:
    return content.value if isinstance(content, ReactionType) else str(content)


class ReactionFormatter:
    """Formats and prints reactions for the console."""

    def __init__(self, use_color: bool = True):
        """Initialize the formatter.

        Args:
            use_color: Whether to emit ANSI color codes
        """
        self.use_color = use_color

    def _style(self, text: str, *codes: str) -> str:
        if not self.use_color:
            return text
        return ''.join(codes) + text + RESET

    def format_reaction(self, reaction: Reaction) -> str:
        login = reaction.user.login if reaction.user else '(unknown)'
        created = reaction.created_at.strftime('%Y-%m-%d %H:%M') if reaction.created_at else '-'
        return f"{reaction.id:<12} {_content_value(reaction.content):<10} {login:<24} {created}"

    def print_reactions(self, reactions: Sequence[Reaction], title: str = 'REACTIONS'):
        """Print one line per reaction under a header."""
        print("\n" + "="*80)
        print(self._style(title, BOLD))
        print("="*80)

        if not reactions:
            print("\nNo reactions found.")
            return

        print(self._style(f"{'ID':<12} {'CONTENT':<10} {'USER':<24} CREATED", CYAN))
        for reaction in reactions:
            print(self.format_reaction(reaction))

    @staticmethod
    def summarize(reactions: Sequence[Reaction]) -> Dict[str, int]:
        """Count reactions by kind.

        Known kinds come first in ReactionType order, followed by any kinds
        GitHub sent that this client does not know, in first-seen order.

        Args:
            reactions: The reactions to count

        Returns:
            Ordered mapping of content value to count, kinds with no reactions omitted
        """
        counts = Counter(_content_value(r.content) for r in reactions)
        summary = {}
        for kind in ReactionType:
            if counts[kind.value]:
                summary[kind.value] = counts.pop(kind.value)
        for r in reactions:
            value = _content_value(r.content)
            if value in counts:
                summary[value] = counts.pop(value)
        return summary

    def print_summary(self, reactions: Sequence[Reaction]):
        """Print reaction counts per kind."""
        summary = self.summarize(reactions)
        print("\n" + self._style("REACTION SUMMARY", BOLD))
        if not summary:
            print("No reactions found.")
            return

        for value, count in summary.items():
            try:
                emoji = EMOJI[ReactionType(value)]
            except ValueError:
                emoji = '?'
            print(f"  {emoji}  {value:<10} {count}")
        print(f"  Total: {sum(summary.values())}")
