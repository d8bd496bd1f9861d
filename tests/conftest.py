import pytest
from fastapi.testclient import TestClient

from form_service.api import create_app as create_form_app
from form_service.config import Settings
from form_service.storage import MemoryStore
from static_server.app import create_app as create_static_app


@pytest.fixture
def public_dir(tmp_path):
    root = tmp_path / 'public'
    (root / 'css').mkdir(parents=True)
    (root / 'index.html').write_text('<h1>home</h1>', encoding='utf-8')
    (root / 'css' / 'site.css').write_text('body {}', encoding='utf-8')
    (root / 'logo.PNG').write_bytes(b'\x89PNG')
    (root / 'blob.bin').write_bytes(b'\x00\x01')
    # sibling of the public root that must never be served
    (tmp_path / 'secret.txt').write_text('top secret', encoding='utf-8')
    return root


@pytest.fixture
def static_client(public_dir):
    app = create_static_app(str(public_dir))
    app.testing = True
    return app.test_client()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def form_client(memory_store):
    app = create_form_app(store=memory_store, settings=Settings())
    return TestClient(app, follow_redirects=False)
