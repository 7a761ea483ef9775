from datetime import datetime
from typing import Annotated, Any

from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag

from urllist.domain.entities import Url, UrlList


# --- Errors ---
class ErrorResponse(BaseModel):
    error: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Every failure leaves the API as {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message})


# --- Lists ---
class CreateListRequest(BaseModel):
    name: str | None = None
    title: str | None = None
    description: str | None = None
    # Older clients send the slug as "customUrl"
    slug: str | None = Field(default=None, validation_alias=AliasChoices("slug", "customUrl"))


class UpdateListRequest(BaseModel):
    id: int | None = None
    name: str | None = None
    title: str | None = None
    description: str | None = None
    slug: str | None = Field(default=None, validation_alias=AliasChoices("slug", "customUrl"))


def _list_write_kind(value: Any) -> str:
    """A body carrying an id updates that list; anything else creates one."""
    if isinstance(value, dict):
        return "update" if value.get("id") is not None else "create"
    return "update" if getattr(value, "id", None) is not None else "create"


ListWriteRequest = Annotated[
    Annotated[CreateListRequest, Tag("create")] | Annotated[UpdateListRequest, Tag("update")],
    Discriminator(_list_write_kind),
]


class UrlResponse(BaseModel):
    id: int
    list_id: int
    url: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, url: Url) -> "UrlResponse":
        return cls.model_validate(url.model_dump())


class ListResponse(BaseModel):
    id: int
    name: str
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    published: bool = False
    published_at: datetime | None = None
    created_at: datetime
    urls: list[UrlResponse] = []

    @classmethod
    def from_entity(cls, lst: UrlList) -> "ListResponse":
        return cls.model_validate(lst.model_dump())


class PublishedListResponse(ListResponse):
    model_config = ConfigDict(populate_by_name=True)

    share_url: str = Field(serialization_alias="shareUrl", validation_alias="shareUrl")

    @classmethod
    def from_published(cls, lst: UrlList, share_url: str) -> "PublishedListResponse":
        return cls.model_validate({**lst.model_dump(), "shareUrl": share_url})


# --- Urls nested under a list ---
class AddUrlRequest(BaseModel):
    url: str | None = None
    title: str | None = None
    description: str | None = None
    image_url: str | None = None


class UpdateUrlAddressRequest(BaseModel):
    urlId: int | None = None
    newUrl: str | None = None


class RemoveUrlRequest(BaseModel):
    urlId: int


# --- Links resource ---
class LinkCreateRequest(BaseModel):
    url: str | None = None
    list_id: int | None = None
    title: str | None = None
    description: str | None = None
    image_url: str | None = None


class LinkUpdateRequest(BaseModel):
    id: int | None = None
    url: str | None = None
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
