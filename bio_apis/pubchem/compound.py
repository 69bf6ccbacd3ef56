"""PubChem compound helpers built on the PUG-REST query builder."""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

from bio_apis.core import http
from bio_apis.pubchem.query import (
    PUG_REST_URL,
    CompoundNamespace,
    CompoundOperation,
    Domain,
    FastSearch,
    FastSearchKind,
    Namespace,
    Operation,
    StructureInput,
    build_query_url,
)

T = TypeVar("T")

OVERVIEW_URL = "https://pubchem.ncbi.nlm.nih.gov/compound"

SIMILARITY_3D = FastSearch(FastSearchKind.FAST_SIMILARITY_3D, StructureInput.CID)


def open_overview(cid: int) -> None:
    http.open_in_browser(f"{OVERVIEW_URL}/{cid}")


def sdf_url(cid: int | str) -> str:
    return f"{PUG_REST_URL}/compound/cid/{cid}/SDF?record_type=3d"


def load_sdf(cid: int | str) -> str:
    """Download the 3D conformer SDF for a compound, returning SDF text."""
    return http.get_text(sdf_url(cid))


def _parse_identifier_list(data: Any) -> list[int]:
    return [int(cid) for cid in data["IdentifierList"]["CID"]]


def _parse_pc_compounds(data: Any) -> list[int]:
    return [int(rec["id"]["id"]["cid"]) for rec in data["PC_Compounds"]]


def _query_json(
    namespace: Namespace,
    identifiers: Sequence[str | int],
    operation: Operation,
    parse: Callable[[Any], T],
) -> T:
    """Compound-domain query; one URL for both the request and any DecodeError."""
    url = build_query_url(Domain.COMPOUND, namespace, identifiers, operation)
    return http.get_json(url, parse)


def find_similar_cids(cid: int) -> list[int]:
    """CIDs of compounds with a similar 3D shape, in the order PubChem ranks them."""
    return _query_json(SIMILARITY_3D, [cid], CompoundOperation.CIDS, _parse_identifier_list)


def find_cids_by_name(name: str) -> list[int]:
    """CIDs of every record matching name. One per record; duplicates are kept."""
    return _query_json(CompoundNamespace.NAME, [name], CompoundOperation.RECORD, _parse_pc_compounds)
