"""PubChem PUG-REST: generic query builder and compound helpers."""

from bio_apis.pubchem.compound import (
    find_cids_by_name,
    find_similar_cids,
    load_sdf,
    open_overview,
    sdf_url,
)
from bio_apis.pubchem.query import (
    AssayNamespace,
    AssayOperation,
    CompoundNamespace,
    CompoundOperation,
    Domain,
    FastSearch,
    FastSearchKind,
    PropertyOperation,
    StructureInput,
    StructureSearch,
    StructureSearchKind,
    SubstanceNamespace,
    SubstanceOperation,
    XrefSearch,
    XrefsOperation,
    XrefType,
    build_query_url,
    join_identifiers,
    parse_namespace,
    parse_operation,
    pubchem_query,
    render,
)

__all__ = [
    "AssayNamespace",
    "AssayOperation",
    "CompoundNamespace",
    "CompoundOperation",
    "Domain",
    "FastSearch",
    "FastSearchKind",
    "PropertyOperation",
    "StructureInput",
    "StructureSearch",
    "StructureSearchKind",
    "SubstanceNamespace",
    "SubstanceOperation",
    "XrefSearch",
    "XrefsOperation",
    "XrefType",
    "build_query_url",
    "join_identifiers",
    "parse_namespace",
    "parse_operation",
    "pubchem_query",
    "render",
    "find_cids_by_name",
    "find_similar_cids",
    "load_sdf",
    "open_overview",
    "sdf_url",
]
