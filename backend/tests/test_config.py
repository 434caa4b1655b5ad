from __future__ import annotations

import pytest
from pydantic import ValidationError

from redditjson import __version__
from redditjson.core.config import Settings, build_user_agent, get_settings
from redditjson.services.response_classifier import SEARCH_REDIRECT_PREFIX
from redditjson.services.thing_decoder import DEFAULT_EXCERPT_CHARS
from redditjson.utils.ids import check_path_segment, strip_kind_prefix


def test_default_user_agent() -> None:
    assert get_settings().reddit_user_agent == f'pc:redditjson:v{__version__} (by /u/deleted)'


def test_user_agent_fields_are_configurable(monkeypatch) -> None:
    monkeypatch.setenv('USER_AGENT_PLATFORM', 'linux')
    monkeypatch.setenv('USER_AGENT_APP_ID', 'thingviewer')
    monkeypatch.setenv('USER_AGENT_APP_VERSION', '2.3.1')
    monkeypatch.setenv('REDDIT_USERNAME', 'spez')

    settings = Settings()

    assert settings.reddit_user_agent == 'linux:thingviewer:v2.3.1 (by /u/spez)'


def test_build_user_agent() -> None:
    agent = build_user_agent(platform='pc', app_id='app', app_version='1.0', username='someone')

    assert agent == 'pc:app:v1.0 (by /u/someone)'


def test_strip_kind_prefix() -> None:
    assert strip_kind_prefix('t3_h966lq') == 'h966lq'
    assert strip_kind_prefix('t1_fuwxyz1') == 'fuwxyz1'
    assert strip_kind_prefix('h966lq') == 'h966lq'
    assert strip_kind_prefix('tx_h966lq') == 'tx_h966lq'


def test_settings_defaults_come_from_the_modules_that_use_them() -> None:
    settings = get_settings()

    assert settings.reddit_search_redirect_prefix == SEARCH_REDIRECT_PREFIX
    assert settings.decode_error_excerpt_chars == DEFAULT_EXCERPT_CHARS


def test_log_level_is_normalised(monkeypatch) -> None:
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    assert Settings().log_level == 'DEBUG'


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv('LOG_LEVEL', 'verbose')

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize('value', ['aww', 'AskReddit', 'h966lq', 'de_IAmA'])
def test_check_path_segment_accepts_names(value) -> None:
    assert check_path_segment(value, 'subreddit') == value


@pytest.mark.parametrize('value', ['', 'a/b', 'aww?limit=1000', 'aww#top', '..', 'a b', 'aww%2F..'])
def test_check_path_segment_rejects_url_syntax(value) -> None:
    with pytest.raises(ValueError):
        check_path_segment(value, 'subreddit')
