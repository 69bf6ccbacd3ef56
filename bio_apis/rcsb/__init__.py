"""RCSB PDB: Search API, Data API and file server."""

from bio_apis.rcsb.client import RCSBClient, open_3d_view, open_overview, open_structure
from bio_apis.rcsb.data_api import (
    get_all_data,
    get_files_avail,
    get_newly_released,
    load_cif,
    load_map,
    load_metadata,
    load_structure_factors_cif,
    load_validation_2fo_fc_cif,
    load_validation_cif,
    load_validation_fo_fc_cif,
    map_gz_url,
    pdb_data_from_seq,
    search,
)
from bio_apis.rcsb.models import FilesAvailable, PdbData, PdbDataResults, PdbMetaData
from bio_apis.rcsb.search import MAX_RESULTS, SearchPayload, SearchResults

__all__ = [
    "RCSBClient",
    "open_3d_view",
    "open_overview",
    "open_structure",
    "get_all_data",
    "get_files_avail",
    "get_newly_released",
    "load_cif",
    "load_map",
    "load_metadata",
    "load_structure_factors_cif",
    "load_validation_2fo_fc_cif",
    "load_validation_cif",
    "load_validation_fo_fc_cif",
    "map_gz_url",
    "pdb_data_from_seq",
    "search",
    "FilesAvailable",
    "PdbData",
    "PdbDataResults",
    "PdbMetaData",
    "MAX_RESULTS",
    "SearchPayload",
    "SearchResults",
]
