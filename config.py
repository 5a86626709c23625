"""
config.py — Runtime Settings
=============================
Everything the demo server reads from the environment, in one place.

    TRAVERSAL_HOST       bind address          (default 127.0.0.1)
    TRAVERSAL_PORT       bind port             (default 5000)
    TRAVERSAL_DEBUG      Flask debug mode      (true / false, 1 / 0, yes / no, on / off)
    TRAVERSAL_LOG_LEVEL  root logging level    (default INFO)

Parsing and validation are left to pydantic-settings; a bad value raises
pydantic's ValidationError naming the field.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(frozen=True, env_prefix="TRAVERSAL_")

    host:       str  = "127.0.0.1"
    port:       int  = 5000
    debug:      bool = False
    log_level:  str  = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
