import logging
import os

from urllist.adapters.sqlite.repos import SQLiteListRepo
from urllist.api.deps import init_db
from urllist.domain.errors import SlugConflictError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")

DEMO_LISTS = [
    {
        "name": "Dev Tools",
        "title": "Everyday developer tools",
        "slug": "dev-tools",
        "urls": [
            ("https://docs.python.org/3/", "Python docs"),
            ("https://fastapi.tiangolo.com/", "FastAPI"),
            ("https://www.sqlite.org/lang.html", "SQLite SQL reference"),
        ],
    },
    {
        "name": "Reading",
        "title": None,
        "slug": None,
        "urls": [
            ("https://peps.python.org/pep-0020/", "The Zen of Python"),
        ],
    },
]


def seed() -> None:
    data_dir = os.environ.get("URLLIST_DATA_DIR", "./data")
    db_path = os.path.join(data_dir, "urllist.db")
    logger.info("Seeding %s", db_path)

    init_db(db_path)
    repo = SQLiteListRepo(db_path)

    for demo in DEMO_LISTS:
        try:
            lst = repo.create_list(
                name=demo["name"], title=demo["title"], description=None, slug=demo["slug"]
            )
        except SlugConflictError:
            logger.info("List /%s already exists, skipping", demo["slug"])
            continue

        for address, title in demo["urls"]:
            repo.add_url_to_list(lst.id, address, title=title)
        logger.info("Created list %s (%d urls)", lst.name, len(demo["urls"]))


if __name__ == "__main__":
    seed()
