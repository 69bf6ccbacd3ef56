"""Convenience functions for RCSB on a shared default client."""

from __future__ import annotations

from typing import Iterable, Optional

from bio_apis.rcsb.client import RCSBClient
from bio_apis.rcsb.models import FilesAvailable, PdbData, PdbDataResults, PdbMetaData
from bio_apis.rcsb.search import SearchPayload, SearchResults

_default_client: Optional[RCSBClient] = None


def _client() -> RCSBClient:
    global _default_client
    if _default_client is None:
        _default_client = RCSBClient()
    return _default_client


def search(payload: SearchPayload) -> SearchResults:
    return _client().search(payload)


def get_newly_released() -> str:
    """Semi-random entry released within the past week."""
    return _client().get_newly_released()


def pdb_data_from_seq(sequence: str | Iterable[str]) -> list[PdbData]:
    """Up to 8 entries matching a protein sequence, with titles."""
    return _client().pdb_data_from_seq(sequence)


def get_all_data(ident: str) -> PdbDataResults:
    """Fetch entry metadata from RCSB Data API.

    Includes the structure title, cross-database references (database2),
    unit cell, citations, deposition status and rcsb_entry_info counts.
    """
    return _client().get_all_data(ident)


def load_metadata(ident: str) -> PdbMetaData:
    """Title of the entry's primary citation."""
    return _client().load_metadata(ident)


def map_gz_url(ident: str) -> str:
    return _client().map_gz_url(ident)


def load_cif(ident: str) -> str:
    return _client().load_cif(ident)


def load_validation_cif(ident: str) -> str:
    return _client().load_validation_cif(ident)


def load_validation_2fo_fc_cif(ident: str) -> str:
    return _client().load_validation_2fo_fc_cif(ident)


def load_validation_fo_fc_cif(ident: str) -> str:
    return _client().load_validation_fo_fc_cif(ident)


def load_structure_factors_cif(ident: str) -> str:
    return _client().load_structure_factors_cif(ident)


def load_map(ident: str) -> bytes:
    return _client().load_map(ident)


def get_files_avail(ident: str) -> FilesAvailable:
    return _client().get_files_avail(ident)
