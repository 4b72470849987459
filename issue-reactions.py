#!/usr/bin/env python3
"""
GitHub Issue Reactions
Lists, adds and removes emoji reactions on GitHub issues.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv
import requests

from issue_reactions.api_connection import ApiConnection
from issue_reactions.api_urls import RepositoryId, RepositoryName
from issue_reactions.config import ClientConfig
from issue_reactions.ensure import ArgumentError
from issue_reactions.issue_reactions_client import IssueReactionsClient
from issue_reactions.models import ApiOptions, NewReaction, ReactionType
from issue_reactions.output import ReactionFormatter


def configure_logging(level: int):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def parse_repository(value: str):
    """Parse ``owner/name`` or a numeric repository id."""
    value = value.strip()
    if value.isdigit():
        return RepositoryId(int(value))
    owner, sep, name = value.partition('/')
    if not sep or not owner or not name or '/' in name:
        raise argparse.ArgumentTypeError(f"expected owner/name or a repository id, got '{value}'")
    return RepositoryName(owner, name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage reactions on GitHub issues.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  %(prog)s list octokit/octokit.net 1 --summary\n"
               "  %(prog)s create 7528679 1 heart\n"
               "  %(prog)s delete octokit/octokit.net 1 123456\n"
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List reactions on an issue')
    list_parser.add_argument('repo', type=parse_repository, help='owner/name or repository id')
    list_parser.add_argument('issue', type=int, help='Issue number')
    list_parser.add_argument('--page-size', type=int, help='Reactions per page')
    list_parser.add_argument('--start-page', type=int, help='First page to fetch')
    list_parser.add_argument('--page-count', type=int, help='Maximum number of pages to fetch')
    list_parser.add_argument('--summary', action='store_true', help='Also print counts per reaction kind')

    create_parser = subparsers.add_parser('create', help='Add a reaction to an issue')
    create_parser.add_argument('repo', type=parse_repository, help='owner/name or repository id')
    create_parser.add_argument('issue', type=int, help='Issue number')
    create_parser.add_argument('content', choices=[kind.value for kind in ReactionType],
                               help='Reaction kind')

    delete_parser = subparsers.add_parser('delete', help='Remove a reaction from an issue')
    delete_parser.add_argument('repo', type=parse_repository, help='owner/name or repository id')
    delete_parser.add_argument('issue', type=int, help='Issue number')
    delete_parser.add_argument('reaction_id', type=int, help='Reaction id')

    return parser


def run(args, client: IssueReactionsClient, formatter: ReactionFormatter):
    """Execute one parsed command against the client."""
    repo = args.repo
    by_id = isinstance(repo, RepositoryId)

    if args.command == 'list':
        options = ApiOptions(page_size=args.page_size, start_page=args.start_page, page_count=args.page_count)
        if by_id:
            reactions = client.get_all_for_repository(repo.id, args.issue, options)
        else:
            reactions = client.get_all(repo.owner, repo.name, args.issue, options)
        formatter.print_reactions(reactions, title=f"REACTIONS ON ISSUE #{args.issue}")
        if args.summary:
            formatter.print_summary(reactions)

    elif args.command == 'create':
        new_reaction = NewReaction(args.content)
        if by_id:
            reaction = client.create_for_repository(repo.id, args.issue, new_reaction)
        else:
            reaction = client.create(repo.owner, repo.name, args.issue, new_reaction)
        formatter.print_reactions([reaction], title="CREATED REACTION")

    elif args.command == 'delete':
        if by_id:
            client.delete_for_repository(repo.id, args.issue, args.reaction_id)
        else:
            client.delete(repo.owner, repo.name, args.issue, args.reaction_id)
        print(f"Deleted reaction {args.reaction_id} from issue #{args.issue}")


def main(argv=None):
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    config = ClientConfig.from_env()
    configure_logging(config.logging_level)
    if config.invalid_log_level:
        logging.warning(f"Invalid LOG_LEVEL value '{config.invalid_log_level}', using default: {config.log_level}")

    args = build_parser().parse_args(argv)

    with ApiConnection.from_config(config) as connection:
        client = IssueReactionsClient(connection)
        try:
            run(args, client, ReactionFormatter(use_color=sys.stdout.isatty()))
        except ArgumentError as e:
            logging.error(f"Invalid argument: {e}")
            sys.exit(1)
        except requests.exceptions.RequestException as e:
            logging.error(f"GitHub request failed: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
