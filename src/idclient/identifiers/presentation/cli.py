"""Command line access to the configured id client.

Usage:
    idclient donor <submitted-donor-id> <project-id>
    idclient mutation 1 100 200 "A>T" single_base_substitution GRCh37
    idclient object <analysis-id> <file-name>
    idclient analysis --count 3

Environment Variables:
    IDCLIENT_CLIENT: Registered client variant (default: hash)
    IDCLIENT_PERSIST_IN_MEMORY: Remember issued analysis ids (default: false)
    IDCLIENT_LOG_LEVEL: Minimum log level (default: info)
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from ulid import ULID

from identifiers.dependencies import create_id_client
from identifiers.domain.exceptions import IdentifierError
from identifiers.ports.client import IIdClient
from infrastructure.logging import configure_logging
from infrastructure.settings import get_id_client_settings

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_PAIRED_FAMILIES: dict[str, Callable[[IIdClient, str, str], str]] = {
    "donor": lambda client, key, project: client.create_donor_id(key, project),
    "specimen": lambda client, key, project: client.create_specimen_id(key, project),
    "sample": lambda client, key, project: client.create_sample_id(key, project),
}


def _positive_int(value: str) -> int:
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {count}")
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="idclient",
        description="Derive stable ICGC identifiers from submitted business keys",
    )
    subparsers = parser.add_subparsers(dest="family", required=True)

    for family in _PAIRED_FAMILIES:
        sub = subparsers.add_parser(family, help=f"Derive a {family} id")
        sub.add_argument("submitted_id", help=f"Submitted {family} id")
        sub.add_argument("project_id", help="Submitted project id")

    file_parser = subparsers.add_parser("file", help="Derive a file id")
    file_parser.add_argument("submitted_id", help="Submitted file id")
    file_parser.add_argument(
        "project_id", nargs="?", default=None, help="Submitted project id"
    )

    mutation_parser = subparsers.add_parser("mutation", help="Derive a mutation id")
    for name in (
        "chromosome",
        "chromosome_start",
        "chromosome_end",
        "mutation",
        "mutation_type",
        "assembly_version",
    ):
        mutation_parser.add_argument(name)

    object_parser = subparsers.add_parser("object", help="Derive an object id")
    object_parser.add_argument("analysis_id")
    object_parser.add_argument("file_name")

    analysis_parser = subparsers.add_parser(
        "analysis", help="Allocate random analysis ids"
    )
    analysis_parser.add_argument(
        "--count",
        type=_positive_int,
        default=1,
        help="Number of ids to allocate (default: 1)",
    )

    return parser


def run(client: IIdClient, args: argparse.Namespace) -> list[str]:
    """Execute the parsed command and return the identifiers produced."""
    if args.family in _PAIRED_FAMILIES:
        return [_PAIRED_FAMILIES[args.family](client, args.submitted_id, args.project_id)]
    if args.family == "file":
        return [client.create_file_id(args.submitted_id, args.project_id)]
    if args.family == "mutation":
        return [
            client.create_mutation_id(
                args.chromosome,
                args.chromosome_start,
                args.chromosome_end,
                args.mutation,
                args.mutation_type,
                args.assembly_version,
            )
        ]
    if args.family == "object":
        return [client.create_object_id(args.analysis_id, args.file_name)]
    return [client.generate_unique_analysis_id() for _ in range(args.count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the idclient command."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_id_client_settings()
        configure_logging(settings.log_level, colors=False, stream=sys.stderr)
        with create_id_client(settings, request_id=str(ULID())) as client:
            for identifier in run(client, args):
                console.print(identifier, markup=False, soft_wrap=True)
    except (IdentifierError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
