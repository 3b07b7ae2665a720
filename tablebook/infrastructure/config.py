from pathlib import Path

from pydantic import BaseModel, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class TableSeed(BaseModel):
    id: int
    number: int
    capacity: PositiveInt


DEFAULT_TABLES = [
    TableSeed(id=1, number=1, capacity=2),
    TableSeed(id=2, number=2, capacity=2),
    TableSeed(id=3, number=3, capacity=4),
    TableSeed(id=4, number=4, capacity=4),
    TableSeed(id=5, number=5, capacity=6),
    TableSeed(id=6, number=6, capacity=8),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TABLEBOOK_", extra="ignore")

    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    frontend_dir: Path = Path(__file__).resolve().parents[1] / "frontend"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"
    log_dir: Path | None = None

    # JSON in the environment, e.g. TABLEBOOK_TABLES='[{"id": 1, "number": 1, "capacity": 2}]'
    tables: list[TableSeed] = DEFAULT_TABLES


settings = Settings()
