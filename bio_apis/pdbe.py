"""PDBe chemical components (https://www.ebi.ac.uk/pdbe/)."""

from __future__ import annotations

from bio_apis.core import http

OVERVIEW_URL = "https://www.ebi.ac.uk/pdbe-srv/pdbechem/chemicalCompound/show"
SDF_URL = "https://www.ebi.ac.uk/pdbe/static/files/pdbechem_v2"


def open_overview(ident: str) -> None:
    http.open_in_browser(f"{OVERVIEW_URL}/{ident}")


def sdf_url(ident: str) -> str:
    """The "ideal" coordinates SDF, not the "model" one."""
    return f"{SDF_URL}/{ident.upper()}_ideal.sdf"


def load_sdf(ident: str) -> str:
    return http.get_text(sdf_url(ident))
