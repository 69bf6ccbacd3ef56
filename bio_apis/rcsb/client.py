"""RCSB client: Search API, Data API and file downloads."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from bio_apis.core import http
from bio_apis.core.errors import DecodeError, LocalIOError, TransportError
from bio_apis.rcsb import urls
from bio_apis.rcsb.models import FilesAvailable, PdbData, PdbDataResults, PdbMetaData
from bio_apis.rcsb.search import (
    MAX_RESULTS,
    SEARCH_URL,
    SearchPayload,
    SearchResults,
    newly_released_payload,
    sequence_payload,
)

logger = logging.getLogger(__name__)

DATA_API_URL = "https://data.rcsb.org/rest/v1/core/entry"


class RCSBClient:
    """Client for the RCSB Search API, Data API and file server.

    Every method is one or more blocking requests, made in sequence. The
    timeout defaults to the global setting when left as None.
    """

    def __init__(
        self,
        data_url: str = DATA_API_URL,
        search_url: str = SEARCH_URL,
        timeout: Optional[float] = None,
    ) -> None:
        self.data_url = data_url.rstrip("/")
        self.search_url = search_url
        self.timeout = timeout

    # --- Search API ----------------------------------------------------------

    def search(self, payload: SearchPayload) -> SearchResults:
        """POST a query to the Search API.

        A query with no hits is answered 204 with an empty body; that comes
        back as an empty SearchResults.
        """
        body = http.post_text(self.search_url, payload.to_dict(), timeout=self.timeout)
        if not body.strip():
            return SearchResults.empty(payload.return_type)
        return http.decode_json(body, self.search_url, SearchResults.from_dict)

    def get_newly_released(self) -> str:
        """ID of a random entry released within the past week."""
        results = self.search(newly_released_payload())
        if not results.result_set:
            raise TransportError("No entries released in the past week", url=self.search_url)
        return random.choice(results.result_set).identifier

    def pdb_data_from_seq(self, sequence: str | Iterable[str]) -> list[PdbData]:
        """Entries matching an amino-acid sequence, with their titles.

        Keeps the first MAX_RESULTS hits, then fetches each title from the Data
        API one at a time. A failed title fetch fails the whole call.
        """
        seq = sequence if isinstance(sequence, str) else "".join(sequence)
        hits = self.search(sequence_payload(seq)).top(MAX_RESULTS)
        logger.debug("Sequence search: %d hits kept", len(hits))
        return [PdbData(rcsb_id=h.identifier, title=self.get_all_data(h.identifier).struct.title) for h in hits]

    # --- Data API ------------------------------------------------------------

    def entry_url(self, ident: str) -> str:
        return f"{self.data_url}/{ident.upper()}"

    def get_all_data(self, ident: str) -> PdbDataResults:
        """GET /rest/v1/core/entry/{ident}"""
        return http.get_json(self.entry_url(ident), PdbDataResults.from_dict, timeout=self.timeout)

    def load_metadata(self, ident: str) -> PdbMetaData:
        return http.get_json(self.entry_url(ident), PdbMetaData.from_dict, timeout=self.timeout)

    def map_gz_url(self, ident: str) -> str:
        """URL of the EMDB density map linked to an entry, from its Data API record."""
        emdb_code = self.get_all_data(ident).emdb_code
        if emdb_code is None:
            raise TransportError(f"No EMDB map linked to {ident}", url=self.entry_url(ident))
        return urls.emdb_map_gz_url(emdb_code)

    # --- Files ---------------------------------------------------------------

    def load_cif(self, ident: str) -> str:
        """Atomic coordinates in PDBx/mmCIF. Fetched gzip-compressed, returned as text."""
        return http.get_gz_text(urls.cif_gz_url(ident), timeout=self.timeout)

    def load_validation_cif(self, ident: str) -> str:
        return http.get_gz_text(urls.validation_cif_gz_url(ident), timeout=self.timeout)

    def load_validation_2fo_fc_cif(self, ident: str) -> str:
        """2Fo-Fc map coefficients from the validation report."""
        return http.get_gz_text(urls.validation_2fo_fc_cif_gz_url(ident), timeout=self.timeout)

    def load_validation_fo_fc_cif(self, ident: str) -> str:
        """Fo-Fc map coefficients from the validation report."""
        return http.get_gz_text(urls.validation_fo_fc_cif_gz_url(ident), timeout=self.timeout)

    def load_structure_factors_cif(self, ident: str) -> str:
        return http.get_gz_text(urls.structure_factors_cif_gz_url(ident), timeout=self.timeout)

    def load_map(self, ident: str) -> bytes:
        """Density map bytes, decompressed. Most entries have none."""
        return http.get_gz_bytes(self.map_gz_url(ident), timeout=self.timeout)

    def file_exists(self, url: str) -> bool:
        return http.url_exists(url, timeout=self.timeout)

    def get_files_avail(self, ident: str) -> FilesAvailable:
        """Which optional files (validation, structure factors, map) the entry has."""
        if len(ident) < 3:
            raise LocalIOError(f"RCSB ID too short: {ident!r}")

        try:
            map_url: Optional[str] = self.map_gz_url(ident)
        except (TransportError, DecodeError):
            map_url = None

        return FilesAvailable(
            validation=self.file_exists(urls.validation_cif_gz_url(ident)),
            validation_2fo_fc=self.file_exists(urls.validation_2fo_fc_cif_gz_url(ident)),
            validation_fo_fc=self.file_exists(urls.validation_fo_fc_cif_gz_url(ident)),
            structure_factors=self.file_exists(urls.structure_factors_cif_url(ident)),
            map=self.file_exists(map_url) if map_url else False,
        )


def open_overview(ident: str) -> None:
    http.open_in_browser(urls.overview_url(ident))


def open_3d_view(ident: str) -> None:
    http.open_in_browser(urls.view_3d_url(ident))


def open_structure(ident: str) -> None:
    """Open the entry's mmCIF file in the browser."""
    http.open_in_browser(urls.structure_view_url(ident))
