"""Download and web-page URLs for RCSB PDB entries.

These work with 4-character (legacy) and 12-character extended PDB IDs.
"""

from __future__ import annotations

from bio_apis.core.errors import LocalIOError

OVERVIEW_URL = "https://www.rcsb.org/structure"
VIEW_3D_URL = "https://www.rcsb.org/3d-view"
STRUCTURE_VIEW_URL = "https://files.rcsb.org/view"
DOWNLOAD_URL = "https://files.rcsb.org/download"
VALIDATION_URL = "https://files.rcsb.org/validation/download"
EMDB_URL = "https://files.rcsb.org/pub/emdb/structures"


def overview_url(ident: str) -> str:
    return f"{OVERVIEW_URL}/{ident}"


def view_3d_url(ident: str) -> str:
    return f"{VIEW_3D_URL}/{ident}"


def structure_view_url(ident: str) -> str:
    return f"{STRUCTURE_VIEW_URL}/{ident}.cif"


def cif_url(ident: str) -> str:
    return f"{DOWNLOAD_URL}/{ident.upper()}.cif"


def cif_gz_url(ident: str) -> str:
    return cif_url(ident) + ".gz"


def validation_base_url(ident: str) -> str:
    """Common prefix of the validation report files. IDs shorter than 3 characters raise LocalIOError."""
    if len(ident) < 3:
        raise LocalIOError(f"PDB ID must be >= 3 characters: {ident!r}")
    return f"{VALIDATION_URL}/{ident}_validation"


def validation_cif_gz_url(ident: str) -> str:
    return validation_base_url(ident) + ".cif.gz"


def validation_2fo_fc_cif_gz_url(ident: str) -> str:
    return validation_base_url(ident) + "_2fo-fc_map_coef.cif.gz"


def validation_fo_fc_cif_gz_url(ident: str) -> str:
    return validation_base_url(ident) + "_fo-fc_map_coef.cif.gz"


def structure_factors_cif_url(ident: str) -> str:
    return f"{DOWNLOAD_URL}/{ident.upper()}-sf.cif"


def structure_factors_cif_gz_url(ident: str) -> str:
    return structure_factors_cif_url(ident) + ".gz"


def emdb_map_gz_url(emdb_code: str) -> str:
    """e.g. EMD-39757 -> .../EMD-39757/map/emd_39757.map.gz"""
    file_stem = emdb_code.replace("-", "_").lower()
    return f"{EMDB_URL}/{emdb_code}/map/{file_stem}.map.gz"
