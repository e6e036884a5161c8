import os, sys
import pytest
from bs4 import BeautifulSoup
# Ensure repo root is on sys.path so "portfolio" imports work when running from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture
def app():
    from portfolio import create_app

    cfg = {
        "TESTING": True,
        # pin these so a developer's environment can't change the defaults under test
        "DEFAULT_THEME": "dark",
        "ANIMATIONS_ENABLED": True,
    }
    return create_app(cfg)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s


@pytest.fixture
def html_classes():
    """Class list of the <html> element (the document-root flag)."""
    def _c(s):
        return s.html.get("class") or []
    return _c
