from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redditjson import __version__
from redditjson.services.response_classifier import SEARCH_REDIRECT_PREFIX
from redditjson.services.thing_decoder import DEFAULT_EXCERPT_CHARS

REPO_ROOT = Path(__file__).resolve().parents[3]

LogLevel = Literal['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(REPO_ROOT / '.env'), env_file_encoding='utf-8', extra='ignore')

    app_name: str = 'redditjson'
    log_level: LogLevel = Field(default='INFO', validation_alias='LOG_LEVEL')

    reddit_base_url: str = 'https://www.reddit.com'
    # Reddit answers unknown subreddits with a redirect to this search endpoint.
    reddit_search_redirect_prefix: str = SEARCH_REDIRECT_PREFIX
    reddit_timeout_connect: float = 5.0
    reddit_timeout_read: float = 20.0

    user_agent_platform: str = 'pc'
    user_agent_app_id: str = 'redditjson'
    user_agent_app_version: str = __version__
    user_agent_username: str = Field(default='deleted', validation_alias='REDDIT_USERNAME')

    decode_error_excerpt_chars: int = DEFAULT_EXCERPT_CHARS

    @field_validator('log_level', mode='before')
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def reddit_user_agent(self) -> str:
        return build_user_agent(
            platform=self.user_agent_platform,
            app_id=self.user_agent_app_id,
            app_version=self.user_agent_app_version,
            username=self.user_agent_username,
        )


def build_user_agent(*, platform: str, app_id: str, app_version: str, username: str) -> str:
    # See https://github.com/reddit-archive/reddit/wiki/API#rules
    return f'{platform}:{app_id}:v{app_version} (by /u/{username})'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
