"""DrugBank small-molecule structures (https://docs.drugbank.com/v1/)."""

from __future__ import annotations

from bio_apis.core import http

OVERVIEW_URL = "https://go.drugbank.com/drugs"
STRUCTURES_URL = "https://go.drugbank.com/structures/small_molecule_drugs"


def open_overview(ident: str) -> None:
    http.open_in_browser(f"{OVERVIEW_URL}/{ident}")


def sdf_url(ident: str) -> str:
    return f"{STRUCTURES_URL}/{ident.upper()}.sdf?type=3d"


def load_sdf(ident: str) -> str:
    """Download a 3D SDF file from DrugBank, returning SDF text."""
    return http.get_text(sdf_url(ident))
