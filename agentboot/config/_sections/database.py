"""Database adapter configuration models."""

from pydantic import BaseModel


class DatabaseSettings(BaseModel):
    mongodb_connection_string: str = ""
    mongodb_database: str = "elizaAgent"
    supabase_url: str = ""
    supabase_anon_key: str = ""
    postgres_url: str = ""
    pglite_data_dir: str = ""
    qdrant_url: str = ""
    qdrant_key: str = ""
    qdrant_port: int | None = None
    qdrant_vector_size: int | None = None
    sqlite_file: str = ""
    data_dir: str = "data"
