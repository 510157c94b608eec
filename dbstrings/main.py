"""Application wiring and the ``dbstrings`` command line entrypoint."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from dbstrings.config import LocalizationSettings, get_settings
from dbstrings.db.session import Database
from dbstrings.i18n.cache import ResourceCache
from dbstrings.i18n.factory import ResolverFactory
from dbstrings.i18n.resolver import Resolver
from dbstrings.logging import configure_logging, logger
from dbstrings.services.store import ResourceStore, SqlAlchemyResourceStore


def create_resolver_factory(
    settings: LocalizationSettings | None = None,
    *,
    database: Database | None = None,
    store: ResourceStore | None = None,
) -> ResolverFactory:
    """Build a factory backed by the configured database.

    Keep one factory per process; every factory owns separate caches.
    """

    settings = settings or get_settings()
    if store is None:
        store = SqlAlchemyResourceStore(database or Database(settings=settings))
    return ResolverFactory(store, settings)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dbstrings", description=__doc__)
    parser.add_argument("--init-db", action="store_true", help="create the localization tables")
    parser.add_argument("--locale", default=None, help="locale to resolve in")
    subparsers = parser.add_subparsers(dest="command")

    lookup = subparsers.add_parser("lookup", help="resolve one key")
    lookup.add_argument("resource")
    lookup.add_argument("key")
    lookup.add_argument("args", nargs="*", help="positional format arguments")

    listing = subparsers.add_parser("list", help="list every string of a resource")
    listing.add_argument("resource")
    listing.add_argument(
        "--no-parents",
        action="store_true",
        help="only list keys stored for the exact locale",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    options = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database(settings=settings)
    if options.init_db:
        database.create_schema()
        logger.info("schema_created")
    if options.command is None:
        if not options.init_db:
            parser.print_help()
        return 0

    # The command line takes stored resource names, so no name derivation here.
    resolver = Resolver(
        options.resource,
        ResourceCache(SqlAlchemyResourceStore(database)),
        default_locale=settings.default_locale,
    )
    if options.command == "lookup":
        print(resolver.resolve_formatted(options.key, *options.args, locale=options.locale))
        return 0

    for item in resolver.enumerate_strings(
        not options.no_parents, options.locale, strict=False
    ):
        marker = " " if item.found else "?"
        print(f"{marker} {item.name}\t{item.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
