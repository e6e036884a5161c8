"""
Portfolio Flask app (single page).

- Factory: create_app(config=None)
- Routes:
    GET  /                 -> render index.html (theme from ?theme=, default dark)
    POST /theme/toggle     -> flip the posted mode, 303 back to /?theme=<new>
    GET  /theme            -> {"mode", "dark", "next", "label"}
    GET  /tech-stack.json  -> the 10 tech stack entries
    GET  /healthz          -> {"ok": true}
- Theme is never stored server-side (no cookie, no session): a plain reload
  of / always starts dark.
"""

from __future__ import annotations

import datetime as dt
import logging
import os
from functools import partial
from types import SimpleNamespace

from flask import Flask, jsonify, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException

from . import content
from .errors import InvalidThemeError
from .theme import (
    ThemeController,
    parse_mode,
    resolve_mode,
    style_for,
    style_table,
    toggle_icon,
    toggle_label,
    toggle_mode,
)
from .visibility import AnimatedSection


# ---------------- helpers ----------------

def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


def _animated_sections(app: Flask) -> dict:
    """
    section id -> html attrs for the wrapper (empty when animations are off).

    The browser does the observing (static/portfolio.js), so the server only
    builds each AnimatedSection for its validated data-* attributes. Called
    once from the factory so a bad ANIMATION_* value fails there.
    """
    if not app.config["ANIMATIONS_ENABLED"]:
        return {s.id: {} for s in content.SECTIONS}
    return {
        s.id: AnimatedSection(
            s.id,
            threshold=app.config["ANIMATION_THRESHOLD"],
            duration=app.config["ANIMATION_DURATION"],
            offset=app.config["ANIMATION_OFFSET"],
        ).attrs()
        for s in content.SECTIONS
    }


def _log_level(value) -> int:
    """LOG_LEVEL name (any case) or number -> logging level."""
    if isinstance(value, int):
        return value
    levels = logging.getLevelNamesMapping()
    name = str(value).strip().upper()
    if name not in levels:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(levels)}, got {value!r}"
        )
    return levels[name]


def _page_context(app: Flask, controller: ThemeController) -> dict:
    mode = controller.mode
    return {
        "title": f"{content.PROFILE.name} | Portfolio",
        "profile": content.PROFILE,
        "social_links": content.SOCIAL_LINKS,
        "section": content.section,
        "tech_stack": content.TECH_STACK,
        "about": content.ABOUT,
        "education": content.EDUCATION,
        "projects": content.PROJECTS,
        "projects_note": content.PROJECTS_NOTE,
        "skills": content.SKILLS,
        "theme": mode,
        "next_theme": toggle_mode(mode),
        "root_class": controller.root.css_class(),
        "style": partial(style_for, mode),
        "toggle_label": toggle_label(mode),
        "toggle_icon": toggle_icon(mode),
        "animated": app.state.animated,
        "theme_styles": style_table(),
        "year": dt.date.today().year,
    }


def _error(message: str, status: int):
    return jsonify({"ok": False, "error": message}), status


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        DEFAULT_THEME=os.getenv("PORTFOLIO_DEFAULT_THEME", "dark"),
        ANIMATIONS_ENABLED=_env_flag("PORTFOLIO_ANIMATIONS", True),
        ANIMATION_THRESHOLD=0.1,
        ANIMATION_DURATION=0.6,
        ANIMATION_OFFSET=50,
        LOG_LEVEL=os.getenv("PORTFOLIO_LOG_LEVEL", "INFO"),
    )
    if config:
        app.config.update(config)

    app.config["DEFAULT_THEME"] = resolve_mode(app.config["DEFAULT_THEME"])
    level = _log_level(app.config["LOG_LEVEL"])
    app.logger.setLevel(level)
    logging.getLogger("portfolio").setLevel(level)

    app.state = SimpleNamespace(animated=_animated_sections(app))

    # --------------- routes ---------------

    @app.get("/")
    def index():
        """Render the page for the requested (or default) theme."""
        mode = resolve_mode(request.args.get("theme"), app.config["DEFAULT_THEME"])
        controller = ThemeController(mode)
        return render_template("index.html", **_page_context(app, controller))

    @app.post("/theme/toggle")
    def toggle_theme():
        """Flip the posted mode and send the browser back to the page."""
        raw = request.form.get("theme", app.config["DEFAULT_THEME"].value)
        try:
            controller = ThemeController(parse_mode(raw))
        except InvalidThemeError as exc:
            app.logger.warning("rejected theme toggle: %s", exc)
            return _error(str(exc), 400)
        new_mode = controller.toggle()
        return redirect(url_for("index", theme=new_mode.value), code=303)

    @app.get("/theme")
    def theme_state():
        """Theme mode plus the root flag and toggle affordance it implies."""
        mode = resolve_mode(request.args.get("theme"), app.config["DEFAULT_THEME"])
        controller = ThemeController(mode)
        return jsonify({
            "mode": mode.value,
            "dark": controller.root.dark,
            "next": toggle_mode(mode).value,
            "label": toggle_label(mode),
        }), 200

    @app.get("/tech-stack.json")
    def tech_stack():
        return jsonify([{"name": t.name, "url": t.url} for t in content.TECH_STACK]), 200

    @app.get("/healthz")
    def healthz():
        return jsonify({"ok": True}), 200

    @app.errorhandler(404)
    @app.errorhandler(405)
    def http_error(exc: HTTPException):
        app.logger.info("%s %s -> %s", request.method, request.path, exc.code)
        return _error(exc.description or exc.name, exc.code or 500)

    return app
