import datetime as dt

import pytest

from portfolio.content import PROFILE, SECTIONS, SKILLS, SOCIAL_LINKS


@pytest.mark.web
def test_page_loads_with_all_sections(client, soup):
    r = client.get("/")
    assert r.status_code == 200
    s = soup(r.data)
    assert PROFILE.name in s.h1.text
    assert PROFILE.tagline in s.text
    for section in SECTIONS:
        node = s.select_one(f"section#{section.id}")
        assert node is not None, section.id
        assert section.title in node.h2.text
    ids = [n["id"] for n in s.select("main > section")]
    assert ids == ["about", "tech-stack", "education", "projects", "skills"]


@pytest.mark.web
def test_fresh_load_is_dark(client, soup, html_classes):
    s = soup(client.get("/").data)
    assert "dark" in html_classes(s)
    btn = s.select_one('[data-testid="theme-toggle"]')
    assert btn["aria-label"] == "Toggle light mode"
    assert btn.select_one('[data-icon="sun"]') is not None
    assert "from-gray-900" in s.select_one('[data-testid="page"]')["class"]


@pytest.mark.web
def test_social_links_pass_through(client, soup):
    s = soup(client.get("/").data)
    for link in SOCIAL_LINKS:
        a = s.select_one(f'[data-testid="social-{link.icon}"]')
        assert a["href"] == link.url
        assert a.select_one(".sr-only").text == link.label


@pytest.mark.web
def test_projects_and_skills_rendered(client, soup):
    s = soup(client.get("/").data)
    project = s.select_one('[data-testid="project-link"]')
    assert project["href"] == "https://yogikaa.com"
    assert project.img["src"].endswith("/static/Yogika.png")
    items = [li.text for li in s.select("#skills li")]
    assert items == list(SKILLS)
    assert "Technologies used:" in s.select_one("#projects").text


@pytest.mark.web
def test_footer_has_current_year(client, soup):
    s = soup(client.get("/").data)
    assert f"{dt.date.today().year} {PROFILE.name}" in s.footer.text


@pytest.mark.web
def test_project_image_is_served(client):
    r = client.get("/static/Yogika.png")
    assert r.status_code == 200
    assert r.data.startswith(b"\x89PNG")


@pytest.mark.web
def test_root_carries_only_the_theme_flag(client, soup, html_classes):
    assert html_classes(soup(client.get("/").data)) == ["dark"]
