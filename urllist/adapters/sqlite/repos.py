import sqlite3
from datetime import datetime
from typing import Any

from urllist.domain.entities import Url, UrlList, utcnow
from urllist.domain.errors import ListNotFoundError, SlugConflictError


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


class SQLiteListRepo:
    """
    Lists and their urls.

    Deleting a list cascades to its urls through the foreign key, so every
    connection must enable foreign keys.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    # --- Row mapping ---

    def _map_url(self, row: dict[str, Any]) -> Url:
        return Url(
            id=row["id"],
            list_id=row["list_id"],
            url=row["url"],
            title=row["title"],
            description=row["description"],
            image_url=row["image_url"],
            created_at=parse_dt(row["created_at"]) or datetime.min,
        )

    def _map_list(self, row: dict[str, Any], urls: list[Url]) -> UrlList:
        return UrlList(
            id=row["id"],
            name=row["name"],
            title=row["title"],
            description=row["description"],
            slug=row["slug"],
            published=bool(row["published"]),
            published_at=parse_dt(row["published_at"]),
            created_at=parse_dt(row["created_at"]) or datetime.min,
            urls=urls,
        )

    def _fetch_list(self, conn: sqlite3.Connection, list_id: int) -> UrlList | None:
        row = conn.execute("SELECT * FROM lists WHERE id = ?", (list_id,)).fetchone()
        if not row:
            return None
        url_rows = conn.execute(
            "SELECT * FROM urls WHERE list_id = ? ORDER BY id ASC", (list_id,)
        ).fetchall()
        return self._map_list(row, [self._map_url(r) for r in url_rows])

    def _fetch_url(self, conn: sqlite3.Connection, url_id: int) -> Url | None:
        row = conn.execute("SELECT * FROM urls WHERE id = ?", (url_id,)).fetchone()
        return self._map_url(row) if row else None

    # --- Lists ---

    def get_lists(self) -> list[UrlList]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM lists ORDER BY created_at DESC, id DESC").fetchall()
            url_rows = conn.execute("SELECT * FROM urls ORDER BY id ASC").fetchall()

            urls_by_list: dict[int, list[Url]] = {}
            for r in url_rows:
                urls_by_list.setdefault(r["list_id"], []).append(self._map_url(r))

            return [self._map_list(row, urls_by_list.get(row["id"], [])) for row in rows]
        finally:
            conn.close()

    def get_list_by_id(self, list_id: int) -> UrlList | None:
        conn = self._get_conn()
        try:
            return self._fetch_list(conn, list_id)
        finally:
            conn.close()

    def create_list(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                """
                INSERT INTO lists (name, title, description, slug, published, created_at)
                VALUES (?, ?, ?, ?, 0, ?)
            """,
                (name, title, description, slug, utcnow().isoformat()),
            )
            conn.commit()
            list_id = cursor.lastrowid
            assert list_id is not None
            created = self._fetch_list(conn, list_id)
            assert created is not None
            return created
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if slug and "slug" in str(e):
                raise SlugConflictError(slug) from e
            raise
        finally:
            conn.close()

    def update_list(
        self,
        list_id: int,
        name: str | None = None,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList | None:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                """
                UPDATE lists SET
                    name = COALESCE(?, name),
                    title = COALESCE(?, title),
                    description = COALESCE(?, description),
                    slug = COALESCE(?, slug)
                WHERE id = ?
            """,
                (name, title, description, slug, list_id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                return None
            return self._fetch_list(conn, list_id)
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if slug and "slug" in str(e):
                raise SlugConflictError(slug) from e
            raise
        finally:
            conn.close()

    def delete_list(self, list_id: int) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM lists WHERE id = ?", (list_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def publish_list(self, list_id: int) -> UrlList | None:
        conn = self._get_conn()
        try:
            # published_at keeps the first publish time; re-publishing is a no-op
            cursor = conn.execute(
                """
                UPDATE lists SET
                    published = 1,
                    published_at = COALESCE(published_at, ?)
                WHERE id = ?
            """,
                (utcnow().isoformat(), list_id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                return None
            return self._fetch_list(conn, list_id)
        finally:
            conn.close()

    def unpublish_list(self, list_id: int) -> UrlList | None:
        conn = self._get_conn()
        try:
            cursor = conn.execute("UPDATE lists SET published = 0 WHERE id = ?", (list_id,))
            conn.commit()
            if cursor.rowcount == 0:
                return None
            return self._fetch_list(conn, list_id)
        finally:
            conn.close()

    # --- Urls ---

    def add_url_to_list(
        self,
        list_id: int,
        url: str,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url:
        conn = self._get_conn()
        try:
            exists = conn.execute("SELECT 1 FROM lists WHERE id = ?", (list_id,)).fetchone()
            if not exists:
                raise ListNotFoundError(list_id)

            cursor = conn.execute(
                """
                INSERT INTO urls (list_id, url, title, description, image_url, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
            """,
                (list_id, url, title, description, image_url, utcnow().isoformat()),
            )
            conn.commit()
            url_id = cursor.lastrowid
            assert url_id is not None
            created = self._fetch_url(conn, url_id)
            assert created is not None
            return created
        finally:
            conn.close()

    def get_urls_for_list(self, list_id: int) -> list[Url]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM urls WHERE list_id = ? ORDER BY id ASC", (list_id,)
            ).fetchall()
            return [self._map_url(r) for r in rows]
        finally:
            conn.close()

    def get_url_by_id(self, url_id: int) -> Url | None:
        conn = self._get_conn()
        try:
            return self._fetch_url(conn, url_id)
        finally:
            conn.close()

    def update_url(
        self,
        url_id: int,
        url: str | None = None,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url | None:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                """
                UPDATE urls SET
                    url = COALESCE(?, url),
                    title = COALESCE(?, title),
                    description = COALESCE(?, description),
                    image_url = COALESCE(?, image_url)
                WHERE id = ?
            """,
                (url, title, description, image_url, url_id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                return None
            return self._fetch_url(conn, url_id)
        finally:
            conn.close()

    def delete_url(self, url_id: int) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM urls WHERE id = ?", (url_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()
