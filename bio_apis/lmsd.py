"""LIPID MAPS Structure Database (https://www.lipidmaps.org/databases/lmsd)."""

from __future__ import annotations

from bio_apis.core import http

BASE_URL = "https://www.lipidmaps.org/databases/lmsd"


def open_overview(ident: str) -> None:
    http.open_in_browser(f"{BASE_URL}/{ident.upper()}")


def sdf_url(ident: str) -> str:
    # 2D coordinates only
    return f"{BASE_URL}/{ident.upper()}?format=sdf"


def load_sdf(ident: str) -> str:
    return http.get_text(sdf_url(ident))
