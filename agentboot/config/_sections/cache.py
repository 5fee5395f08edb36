"""Cache store configuration models."""

from pydantic import BaseModel


class CacheSettings(BaseModel):
    store: str = "database"
    redis_url: str = ""
    cache_dir: str = ""
