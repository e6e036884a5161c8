import pytest

from portfolio.visibility import AnimatedSection, VisibilityTracker


@pytest.mark.animation
def test_starts_hidden_and_latches_once():
    tracker = VisibilityTracker()
    section = AnimatedSection("tech-stack", tracker=tracker)
    assert section.state == "hidden"
    assert section.style() == {"opacity": 0, "offset": 50, "duration": 0.6}

    tracker.report("tech-stack", 0.05)  # below threshold
    assert section.state == "hidden"

    tracker.report("tech-stack", 0.1)
    assert section.style() == {"opacity": 1, "offset": 0, "duration": 0.6}
    assert section.transitions == 1
    assert tracker.watching("tech-stack") == 0


@pytest.mark.animation
def test_scrolling_away_and_back_does_not_replay():
    tracker = VisibilityTracker()
    section = AnimatedSection("about", tracker=tracker)
    tracker.report("about", 0.8)
    tracker.report("about", 0.0)
    assert section.has_been_visible
    tracker.report("about", 1.0)
    assert section.transitions == 1


@pytest.mark.animation
def test_reports_for_other_elements_are_ignored():
    tracker = VisibilityTracker()
    about = AnimatedSection("about", tracker=tracker)
    skills = AnimatedSection("skills", tracker=tracker)
    tracker.report("skills", 1.0)
    assert skills.state == "visible"
    assert about.state == "hidden"


@pytest.mark.animation
def test_without_tracker_content_is_visible():
    section = AnimatedSection("projects")
    assert section.state == "visible"
    assert section.style()["opacity"] == 1
    assert section.transitions == 0


@pytest.mark.animation
def test_invalid_ratios_and_thresholds():
    tracker = VisibilityTracker()
    with pytest.raises(ValueError):
        tracker.report("about", 1.5)
    with pytest.raises(ValueError):
        tracker.observe("about", lambda r: None, threshold=-0.1)


@pytest.mark.animation
def test_unobserve_is_idempotent():
    tracker = VisibilityTracker()
    calls = []
    unobserve = tracker.observe("about", calls.append)
    unobserve()
    unobserve()
    tracker.report("about", 1.0)
    assert calls == []


@pytest.mark.animation
def test_page_marks_sections_for_the_client_script(client, soup):
    s = soup(client.get("/").data)
    for node in s.select("main > section"):
        assert node.has_attr("data-animate")
        assert node["data-threshold"] == "0.1"
        assert node["data-duration"] == "0.6"
        assert node["data-offset"] == "50"
    assert s.select_one('script[src$="portfolio.js"]') is not None


@pytest.mark.animation
def test_animations_disabled_renders_plain_sections():
    from portfolio import create_app
    app = create_app({"TESTING": True, "ANIMATIONS_ENABLED": False})
    r = app.test_client().get("/")
    assert r.status_code == 200
    assert b"data-animate" not in r.data


@pytest.mark.animation
@pytest.mark.parametrize("kwargs", [{"threshold": 1.5}, {"threshold": -0.1}, {"duration": -0.2}])
def test_section_rejects_bad_settings(kwargs):
    with pytest.raises(ValueError):
        AnimatedSection("about", **kwargs)


@pytest.mark.animation
def test_wrapper_attrs_built_once_per_app(app, client):
    attrs = app.state.animated
    assert set(attrs) == {"about", "tech-stack", "education", "projects", "skills"}
    client.get("/")
    client.get("/")
    assert app.state.animated is attrs
