"""Amber GeoStd Mol2, lib and FRCMOD files for small organic molecules.

Served from a hosted mirror of the AMBER_GEOSTD collection (base URL from
BIO_APIS_GEOSTD_URL). Identifiers can be Amber GeoStd / PDBe codes, which
match, or PubChem CIDs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bio_apis.config import load_settings
from bio_apis.core import http


def _flag(data: dict, key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a JSON boolean, got {value!r}")
    return value


@dataclass(frozen=True)
class GeostdItem:
    ident: str
    frcmod_avail: bool
    lib_avail: bool

    @classmethod
    def from_dict(cls, data: dict) -> "GeostdItem":
        return cls(
            ident=str(data["ident"]),
            frcmod_avail=_flag(data, "frcmod_avail"),
            lib_avail=_flag(data, "lib_avail"),
        )


@dataclass(frozen=True)
class GeostdData:
    """Text content of a molecule's files. FRCMOD and lib are not always available."""

    mol2: str
    frcmod: Optional[str] = None
    lib: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "GeostdData":
        return cls(mol2=data["mol2"], frcmod=data.get("frcmod"), lib=data.get("lib"))


def _base_url() -> str:
    return load_settings().geostd_base_url


def _parse_items(data: Any) -> list[GeostdItem]:
    return [GeostdItem.from_dict(d) for d in data["result"]]


def get_all_mols() -> list[GeostdItem]:
    """Every molecule in the collection, with FRCMOD / lib availability."""
    return http.get_json(f"{_base_url()}/get-all-mols", _parse_items)


def find_mols(search_text: str) -> list[GeostdItem]:
    """Molecules matching a keyword."""
    return http.post_json(f"{_base_url()}/find-mols", {"search_text": search_text}, _parse_items)


def load_mol_files(ident: str) -> GeostdData:
    return http.post_json(f"{_base_url()}/load-mol-files", {"ident": ident}, GeostdData.from_dict)
