import importlib.util
import json
import logging
import os

import pytest

from flyyer import Flyyer, FlyyerRender, MissingFieldError, config
from flyyer.common import FlyyerCommon
from flyyer.utils.logging import JsonFormatter, bind_build_context, configure_logging


def test_default_settings():
    settings = config.get_settings()
    assert settings.cdn_base == "https://cdn.flyyer.io"
    assert settings.render_base == "https://cdn.flyyer.io/r/v2"
    assert settings.project_base == "https://cdn.flyyer.io/v2"
    assert settings.log_level == "INFO"


def test_cdn_base_from_environment(monkeypatch):
    monkeypatch.setenv("FLYYER_CDN_BASE", "https://images.example.com/")
    monkeypatch.setenv("FLYYER_LOG_LEVEL", "debug")
    config.get_settings.cache_clear()

    settings = config.get_settings()
    assert settings.log_level == "DEBUG"
    assert Flyyer(project="project", meta={"v": None}).href() == "https://images.example.com/v2/project/_/_/"
    assert (
        FlyyerRender(tenant="tenant", deck="deck", template="template", meta={"v": None}).href()
        == "https://images.example.com/r/v2/tenant/deck/template"
    )


def test_dotenv_is_read_without_touching_environment(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("FLYYER_CDN_BASE=https://dotenv.example.com\nHOST_APP_DB_PASSWORD=hunter2\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HOST_APP_DB_PASSWORD", raising=False)

    spec = importlib.util.spec_from_file_location("flyyer_config_fresh", config.__file__)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    assert "HOST_APP_DB_PASSWORD" not in os.environ

    config.get_settings.cache_clear()
    assert config.get_settings().cdn_base == "https://dotenv.example.com"
    assert module.Settings().cdn_base == "https://dotenv.example.com"
    assert "HOST_APP_DB_PASSWORD" not in os.environ
    assert "FLYYER_CDN_BASE" not in os.environ


def test_json_formatter_includes_build_context():
    record = logging.LogRecord("flyyer", logging.INFO, __file__, 1, "built url", None, None)
    record.flavor = "Flyyer"
    record.project = "project"
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {"level": "INFO", "message": "built url", "logger": "flyyer", "flavor": "Flyyer", "project": "project"}


def test_bind_build_context():
    flyyer = FlyyerRender(tenant="tenant", deck="deck", template="template", strategy="hmac", secret="s")
    assert bind_build_context(flyyer) == {
        "flavor": "FlyyerRender",
        "strategy": "HMAC",
        "tenant": "tenant",
        "deck": "deck",
        "template": "template",
    }


def test_href_logs_builds_and_failures(caplog):
    caplog.set_level(logging.DEBUG, logger="flyyer")
    Flyyer(project="project").href()
    built = [record for record in caplog.records if record.getMessage() == "built url"]
    assert built and built[0].project == "project"

    with pytest.raises(MissingFieldError):
        Flyyer(path="about").href()
    failed = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert failed and failed[-1].error_code == "missing_field"


def test_configure_logging_installs_json_handler():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        configure_logging()
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


def test_bind_build_context_includes_normalized_path():
    flyyer = Flyyer(project="project", path=["/products/", 1])
    assert bind_build_context(flyyer) == {"flavor": "Flyyer", "project": "project", "path": "products/1"}
    assert "path" not in bind_build_context(Flyyer(project="project"))


def test_common_builder_cannot_be_instantiated():
    with pytest.raises(TypeError, match="abstract"):
        FlyyerCommon(extension="png")
