from pydantic import BaseModel, Field


class SlugRules(BaseModel):
    min_length: int = 3
    max_length: int = 50
    pattern: str = r"^[A-Za-z0-9-]+$"


class SharingRules(BaseModel):
    default_site_url: str = "http://localhost:3000"
    path_prefix: str = "/list"


class ListRules(BaseModel):
    name_max_length: int = 200


class Rules(BaseModel):
    slugs: SlugRules = Field(default_factory=SlugRules)
    sharing: SharingRules = Field(default_factory=SharingRules)
    lists: ListRules = Field(default_factory=ListRules)
