"""Configuration for the simplecalc command line."""

from typing import Literal

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Settings read from SIMPLECALC_* environment variables or a .env file."""

    log_level: str = "INFO"
    output_format: Literal["json", "raw"] = "json"

    model_config = {
        "env_prefix": "SIMPLECALC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
