from datetime import UTC, datetime

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Links ---

class Url(BaseModel):
    id: int
    list_id: int
    url: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


# --- Lists ---

class UrlList(BaseModel):
    id: int
    name: str
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    published: bool = False
    published_at: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)
    urls: list[Url] = Field(default_factory=list)

    @property
    def path_segment(self) -> str:
        """Segment identifying the list in its public URL."""
        return self.slug or str(self.id)
