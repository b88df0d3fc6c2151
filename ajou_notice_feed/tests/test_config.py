import pytest

from ajou_notice_feed import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "BOARD_URL",
        "ARTICLE_LIMIT",
        "ARTICLE_OFFSET",
        "REQUEST_TIMEOUT",
        "LAST_INDEX_PATH",
        "USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: None)


def test_get_settings_defaults():
    settings = config.get_settings()

    assert settings.board_url == config.DEFAULT_BOARD_URL
    assert settings.article_limit == 30
    assert settings.article_offset == 0
    assert settings.user_agent == "Mozilla/5.0"
    assert settings.request_timeout is None
    assert settings.last_index_path is None


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("BOARD_URL", " https://example.com/board.do ")
    monkeypatch.setenv("ARTICLE_LIMIT", "10")
    monkeypatch.setenv("REQUEST_TIMEOUT", "7.5")
    monkeypatch.setenv("LAST_INDEX_PATH", "/tmp/last_index")

    settings = config.get_settings()

    assert settings.board_url == "https://example.com/board.do"
    assert settings.article_limit == 10
    assert settings.request_timeout == 7.5
    assert settings.last_index_path == "/tmp/last_index"


def test_get_settings_rejects_bad_integers(monkeypatch):
    monkeypatch.setenv("ARTICLE_OFFSET", "first")

    with pytest.raises(ValueError, match="ARTICLE_OFFSET"):
        config.get_settings()
