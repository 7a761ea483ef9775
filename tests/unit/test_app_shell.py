import pytest
from fastapi.testclient import TestClient

from urllist.api.deps import Settings
from urllist.app_shell import cli
from urllist.app_shell.config import ConfigurationError, validate_settings
from urllist.rules.models import Rules, SharingRules


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("URLLIST_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("SITE_URL", raising=False)
    return Settings()


def test_settings_from_env(settings: Settings, tmp_path):
    assert settings.db_path == str(tmp_path / "urllist.db")
    assert settings.site_url is None


def test_validate_settings_falls_back_to_rules(settings: Settings):
    assert validate_settings(settings, Rules()) == "http://localhost:3000"


def test_validate_settings_prefers_env(settings: Settings, monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://lists.example.com")
    assert validate_settings(Settings(), Rules()) == "https://lists.example.com"


def test_validate_settings_rejects_bad_url(settings: Settings):
    rules = Rules(sharing=SharingRules(default_site_url="lists.example.com"))
    with pytest.raises(ConfigurationError):
        validate_settings(settings, rules)


def test_health(api_client: TestClient):
    response = api_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_cli_publish_flow(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("URLLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SITE_URL", "https://lists.example.com")

    cli.main(["migrate"])
    assert (tmp_path / "urllist.db").exists()

    cli.main(["lists"])
    assert "No lists." in capsys.readouterr().out

    repo = cli.get_repo(Settings())
    lst = repo.create_list("Dev Tools", slug="dev-tools")

    cli.main(["publish", str(lst.id)])
    assert "https://lists.example.com/list/dev-tools" in capsys.readouterr().out

    cli.main(["lists"])
    assert "[published]" in capsys.readouterr().out

    cli.main(["unpublish", str(lst.id)])
    assert "private again" in capsys.readouterr().out


def test_cli_publish_missing_list(tmp_path, monkeypatch):
    monkeypatch.setenv("URLLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SITE_URL", "https://lists.example.com")

    with pytest.raises(SystemExit):
        cli.main(["publish", "404"])
