import argparse
import logging
import sys

from urllist.api.deps import Settings, get_rules, init_db
from urllist.adapters.sqlite.repos import SQLiteListRepo
from urllist.app_shell.config import ConfigurationError, validate_settings
from urllist.components.lists import ListService
from urllist.components.publish import PublishComponent, PublishListInput, UnpublishListInput

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_repo(settings: Settings) -> SQLiteListRepo:
    init_db(settings.db_path)
    return SQLiteListRepo(settings.db_path)


def get_publisher(settings: Settings) -> PublishComponent:
    rules = get_rules()
    try:
        site_url = validate_settings(settings, rules)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
    return PublishComponent(
        repo=get_repo(settings), site_url=site_url, path_prefix=rules.sharing.path_prefix
    )


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    init_db(settings.db_path)
    print(f"Database ready: {settings.db_path}")


def handle_lists(settings: Settings, args: argparse.Namespace) -> None:
    service = ListService(repo=get_repo(settings), rules=get_rules())
    lists = service.get_all()
    if not lists:
        print("No lists.")
        return
    for lst in lists:
        state = "published" if lst.published else "private"
        print(f"{lst.id:>4}  {lst.name}  [{state}]  /{lst.path_segment}  ({len(lst.urls)} urls)")


def handle_publish(settings: Settings, args: argparse.Namespace) -> None:
    output = get_publisher(settings).run(PublishListInput(list_id=args.list_id))
    if not output.success:
        for err in output.errors:
            logger.error(err.message)
        sys.exit(1)
    print(f"Published list {args.list_id}: {output.share_url}")


def handle_unpublish(settings: Settings, args: argparse.Namespace) -> None:
    output = get_publisher(settings).run(UnpublishListInput(list_id=args.list_id))
    if not output.success:
        for err in output.errors:
            logger.error(err.message)
        sys.exit(1)
    print(f"List {args.list_id} is private again.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="URL List CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Create the database and apply migrations")

    # lists
    subparsers.add_parser("lists", help="Show all lists")

    # publish / unpublish
    publish_parser = subparsers.add_parser("publish", help="Publish a list and print its URL")
    publish_parser.add_argument("list_id", type=int)
    unpublish_parser = subparsers.add_parser("unpublish", help="Make a list private")
    unpublish_parser.add_argument("list_id", type=int)

    args = parser.parse_args(argv)
    settings = Settings()

    handlers = {
        "migrate": handle_migrate,
        "lists": handle_lists,
        "publish": handle_publish,
        "unpublish": handle_unpublish,
    }
    handlers[args.command](settings, args)


if __name__ == "__main__":
    main()
