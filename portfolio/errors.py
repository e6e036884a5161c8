"""Errors raised by the portfolio helpers.

Routes turn these into JSON error responses; the helpers themselves never
swallow them.
"""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for everything the portfolio package raises on purpose."""


class InvalidThemeError(PortfolioError, ValueError):
    """A theme value that is neither ``light`` nor ``dark``."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"unknown theme mode: {value!r}")


class UnknownRoleError(PortfolioError, KeyError):
    """``style_for`` was asked about a role it has no tokens for."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(role)

    def __str__(self) -> str:
        return f"unknown style role: {self.role!r}"
