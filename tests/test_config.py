import importlib
import os

import pytest

import form_service.api
import static_server.app
from form_service import config as form_config
from static_server import config as static_config


def test_form_defaults(monkeypatch):
    for name in ['FORM_HOST', 'FORM_PORT', 'DATA_FILE', 'CORS_ORIGINS', 'LOG_LEVEL']:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(form_config, 'load_dotenv', lambda: None)

    settings = form_config.load_settings()

    assert settings.port == 3000
    assert settings.data_file == os.path.join('data', 'submissions.json')
    assert settings.cors_origins == ['*']


def test_form_overrides(monkeypatch):
    monkeypatch.setattr(form_config, 'load_dotenv', lambda: None)
    monkeypatch.setenv('FORM_PORT', '8080')
    monkeypatch.setenv('DATA_FILE', '/tmp/x.json')
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test,')

    settings = form_config.load_settings()

    assert settings.port == 8080
    assert settings.data_file == '/tmp/x.json'
    assert settings.cors_origins == ['http://a.test', 'http://b.test']


def test_static_defaults(monkeypatch):
    for name in ['STATIC_HOST', 'STATIC_PORT', 'PUBLIC_DIR']:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(static_config, 'load_dotenv', lambda: None)

    settings = static_config.load_settings()

    assert settings.port == 3001
    assert settings.public_dir == static_config.DEFAULT_PUBLIC_DIR


def test_bad_port_fails(monkeypatch):
    monkeypatch.setattr(static_config, 'load_dotenv', lambda: None)
    monkeypatch.setenv('STATIC_PORT', 'abc')

    with pytest.raises(ValueError):
        static_config.load_settings()


def test_importing_apps_reads_no_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(form_config, 'load_dotenv', lambda: calls.append('form'))
    monkeypatch.setattr(static_config, 'load_dotenv', lambda: calls.append('static'))

    importlib.reload(static_server.app)
    importlib.reload(form_service.api)

    assert calls == []
    assert not hasattr(static_server.app, 'app')
    assert not hasattr(form_service.api, 'app')
