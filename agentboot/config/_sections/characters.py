"""Character source configuration models."""

from typing import Any

from pydantic import BaseModel, field_validator


class CharacterSourceSettings(BaseModel):
    remote_urls: str = ""
    use_storage: bool = False
    storage_dir: str = "data/characters"
    plugin_import_allowlist: str = "agentboot_plugin_"

    @field_validator("use_storage", mode="before")
    @classmethod
    def _exact_true(cls, value: Any) -> Any:
        # Only the literal string "true" enables the storage scan
        if isinstance(value, str):
            return value == "true"
        return value

    def remote_url_list(self) -> list[str]:
        return [url.strip() for url in self.remote_urls.split(",") if url.strip()]

    def allowed_plugin_prefixes(self) -> tuple[str, ...]:
        return tuple(p.strip() for p in self.plugin_import_allowlist.split(",") if p.strip())
