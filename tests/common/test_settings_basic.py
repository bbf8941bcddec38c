import pytest

from autofeature.common import settings as s
from autofeature.common.settings import get_settings
from autofeature.domain.enums import ResolutionPolicy


@pytest.fixture(autouse=True)
def _fresh_settings():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("RESOLVER__POLICY", raising=False)
    cfg = get_settings()
    assert cfg.app_name == "autofeature"
    assert cfg.resolver.policy is ResolutionPolicy.first_match
    assert cfg.resolver.title_prefix_word == "active"
    assert cfg.resolver.meta_key == "_thumbnail_id"
    assert cfg.resolver.lookup_limit == 1
    assert cfg.resolver.hook_priority < 10
    assert cfg.database_url.startswith("postgresql+psycopg://") or cfg.db.url


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("RESOLVER__POLICY", "pooledRandom")
    assert get_settings().resolver.policy is ResolutionPolicy.pooled_random


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DB__DATABASE_URL", "postgresql+psycopg://u:p@db:5432/x")
    assert get_settings().database_url == "postgresql+psycopg://u:p@db:5432/x"


def test_cors_list_is_trimmed(monkeypatch):
    monkeypatch.setenv("API__CORS_ALLOW_ORIGINS", '[" http://a.test", "http://b.test", ""]')
    assert get_settings().api.cors_allow_origins == ["http://a.test", "http://b.test"]
