from pydantic import field_validator
from pydantic_settings import BaseSettings


class _Config(BaseSettings):
    is_debug: bool = True
    root_path: str = ""

    store_url: str = "https://my-json-server-bbsk.onrender.com"
    keep_draft_on_failure: bool = True

    @field_validator("store_url", mode="before")
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


config = _Config()
