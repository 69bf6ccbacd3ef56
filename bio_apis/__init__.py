"""Thin clients for PubChem, RCSB PDB, DrugBank, LIPID MAPS, PDBe and Amber GeoStd."""

from bio_apis.core.errors import DecodeError, LocalIOError, ReqError, TransportError

__version__ = "0.1.4"

__all__ = [
    "DecodeError",
    "LocalIOError",
    "ReqError",
    "TransportError",
    "__version__",
]
