from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ETHICA_", extra="ignore")

    data_dir: Path = Path("data")
    raw_english_path: Path = Path("data/raw/english-ethics.html")
    raw_latin_path: Path = Path("data/raw/latin-part1.html")
    output_path: Path = Path("data/ethics.json")

    english_source_url: str = "https://www.marxists.org/reference/subject/philosophy/works/ne/ethics.htm"
    latin_source_url: str = "https://www.thelatinlibrary.com/spinoza.ethica1.html"

    user_agent: str = "ethica-ingest/0.1 (offline corpus builder)"
    request_timeout_s: float = 30.0
    max_bytes: int = 20_000_000

    # Below this many records the build warns (partial corpora are allowed).
    min_corpus_size: int = 200


settings = Settings()
