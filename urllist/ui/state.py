from dataclasses import dataclass

from urllist.domain.entities import UrlList


@dataclass(frozen=True)
class ListState:
    lists: tuple[UrlList, ...] = ()
    active_list_id: int | None = None


@dataclass(frozen=True)
class UIState:
    is_loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class SharingState:
    is_loading: bool = False
    error: str | None = None
    is_published: bool = False
    share_url: str | None = None
