"""PubChem PUG-REST URL builder and executor.

A request URL is assembled from four parts:

    {base}/{domain}/{namespace}/{identifiers}/{operation}/JSON

Every part is a closed tag with a fixed string rendering (its ``path``).
Enum tags render to their value; parameterised tags (structure searches,
property lists, ...) render to a slash-separated composition of their fields.
Pairing a namespace or operation with the wrong domain is not checked; the
server decides what to do with it.

See https://pubchem.ncbi.nlm.nih.gov/docs/pug-rest
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union
from urllib.parse import quote, unquote

from bio_apis.core import http

PUG_REST_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug"
IDENTIFIER_SEPARATOR = ","
OUTPUT_FORMAT = "JSON"


class _Tag(str, Enum):
    @property
    def path(self) -> str:
        return self.value


# ======================================================================
# Domain
# ======================================================================

class Domain(_Tag):
    SUBSTANCE = "substance"
    COMPOUND = "compound"
    ASSAY = "assay"
    GENE = "gene"
    PROTEIN = "protein"
    PATHWAY = "pathway"
    TAXONOMY = "taxonomy"
    CELL = "cell"


# ======================================================================
# Namespaces
# ======================================================================

class CompoundNamespace(_Tag):
    CID = "cid"
    NAME = "name"
    SMILES = "smiles"
    INCHI = "inchi"
    SDF = "sdf"
    INCHIKEY = "inchikey"
    FORMULA = "formula"
    LISTKEY = "listkey"


class SubstanceNamespace(_Tag):
    SID = "sid"
    NAME = "name"
    LISTKEY = "listkey"


class AssayNamespace(_Tag):
    AID = "aid"
    LISTKEY = "listkey"


class GeneNamespace(_Tag):
    GENE_ID = "geneid"
    GENE_SYMBOL = "genesymbol"
    SYNONYM = "synonym"


class ProteinNamespace(_Tag):
    ACCESSION = "accession"
    GI = "gi"
    SYNONYM = "synonym"


class PathwayNamespace(_Tag):
    PATHWAY_ACCESSION = "pwacc"


class TaxonomyNamespace(_Tag):
    TAXONOMY_ID = "taxid"
    SYNONYM = "synonym"


class CellNamespace(_Tag):
    CELL_ACCESSION = "cellacc"
    SYNONYM = "synonym"


class StructureSearchKind(_Tag):
    SUBSTRUCTURE = "substructure"
    SUPERSTRUCTURE = "superstructure"
    SIMILARITY = "similarity"
    IDENTITY = "identity"


class FastSearchKind(_Tag):
    FAST_IDENTITY = "fastidentity"
    FAST_SIMILARITY_2D = "fastsimilarity_2d"
    FAST_SIMILARITY_3D = "fastsimilarity_3d"
    FAST_SUBSTRUCTURE = "fastsubstructure"
    FAST_SUPERSTRUCTURE = "fastsuperstructure"
    FAST_FORMULA = "fastformula"


class StructureInput(_Tag):
    """How the query structure of a structure search is given."""

    SMILES = "smiles"
    SMARTS = "smarts"
    INCHI = "inchi"
    SDF = "sdf"
    CID = "cid"


class XrefType(_Tag):
    REGISTRY_ID = "RegistryID"
    RN = "RN"
    PUBMED_ID = "PubMedID"
    MMDB_ID = "MMDBID"
    PROTEIN_GI = "ProteinGI"
    NUCLEOTIDE_GI = "NucleotideGI"
    TAXONOMY_ID = "TaxonomyID"
    MIM_ID = "MIMID"
    GENE_ID = "GeneID"
    PROBE_ID = "ProbeID"
    PATENT_ID = "PatentID"


class AssayType(_Tag):
    ALL = "all"
    CONFIRMATORY = "confirmatory"
    DOSE_RESPONSE = "doseresponse"
    ON_HOLD = "onhold"
    PANEL = "panel"
    RNAI = "rnai"
    SCREENING = "screening"
    SUMMARY = "summary"
    CELL_BASED = "cellbased"
    BIOCHEMICAL = "biochemical"
    IN_VIVO = "invivo"
    IN_VITRO = "invitro"
    ACTIVE_CONCENTRATION_SPECIFIED = "activeconcentrationspecified"


class AssayTargetType(_Tag):
    GI = "gi"
    PROTEIN_NAME = "proteinname"
    GENE_ID = "geneid"
    GENE_SYMBOL = "genesymbol"
    ACCESSION = "accession"


@dataclass(frozen=True)
class StructureSearch:
    """Compound-domain structure search, e.g. ``substructure/smiles``."""

    kind: StructureSearchKind
    query: StructureInput

    @property
    def path(self) -> str:
        return f"{self.kind.path}/{self.query.path}"


@dataclass(frozen=True)
class FastSearch:
    """Compound-domain fast search, e.g. ``fastsimilarity_3d/cid``.

    ``fastformula`` takes the formula directly and has no input type.
    """

    kind: FastSearchKind
    query: StructureInput | None = None

    @property
    def path(self) -> str:
        if self.query is None:
            return self.kind.path
        return f"{self.kind.path}/{self.query.path}"


@dataclass(frozen=True)
class XrefSearch:
    xref_type: XrefType

    @property
    def path(self) -> str:
        return f"xref/{self.xref_type.path}"


@dataclass(frozen=True)
class SourceNamespace:
    """Substance records by depositor: ``sourceid/<source>`` or ``sourceall/<source>``."""

    source: str
    every_record: bool = False

    @property
    def path(self) -> str:
        scope = "sourceall" if self.every_record else "sourceid"
        return f"{scope}/{quote(self.source, safe='')}"


@dataclass(frozen=True)
class AssayTypeNamespace:
    assay_type: AssayType

    @property
    def path(self) -> str:
        return f"type/{self.assay_type.path}"


@dataclass(frozen=True)
class AssayTargetNamespace:
    target_type: AssayTargetType

    @property
    def path(self) -> str:
        return f"target/{self.target_type.path}"


@dataclass(frozen=True)
class ActivityNamespace:
    column: str

    @property
    def path(self) -> str:
        return f"activity/{quote(self.column, safe='')}"


Namespace = Union[
    CompoundNamespace,
    SubstanceNamespace,
    AssayNamespace,
    GeneNamespace,
    ProteinNamespace,
    PathwayNamespace,
    TaxonomyNamespace,
    CellNamespace,
    StructureSearch,
    FastSearch,
    XrefSearch,
    SourceNamespace,
    AssayTypeNamespace,
    AssayTargetNamespace,
    ActivityNamespace,
]


# ======================================================================
# Operations
# ======================================================================

class CompoundOperation(_Tag):
    RECORD = "record"
    SYNONYMS = "synonyms"
    SIDS = "sids"
    CIDS = "cids"
    AIDS = "aids"
    ASSAY_SUMMARY = "assaysummary"
    CLASSIFICATION = "classification"
    DESCRIPTION = "description"
    CONFORMERS = "conformers"


class SubstanceOperation(_Tag):
    RECORD = "record"
    SYNONYMS = "synonyms"
    SIDS = "sids"
    CIDS = "cids"
    AIDS = "aids"
    ASSAY_SUMMARY = "assaysummary"
    CLASSIFICATION = "classification"
    DESCRIPTION = "description"


class AssayOperation(_Tag):
    RECORD = "record"
    CONCISE = "concise"
    AIDS = "aids"
    SIDS = "sids"
    CIDS = "cids"
    DESCRIPTION = "description"
    SUMMARY = "summary"
    CLASSIFICATION = "classification"
    DOSE_RESPONSE = "doseresponse/sid"


class BiologyOperation(_Tag):
    """Operations of the gene, protein, pathway, taxonomy and cell domains."""

    SUMMARY = "summary"
    CONCISE = "concise"
    AIDS = "aids"
    CIDS = "cids"
    PATHWAY_ACCESSIONS = "pwaccs"
    GENE_IDS = "geneids"
    ACCESSIONS = "accessions"


@dataclass(frozen=True)
class PropertyOperation:
    """Compound property table, e.g. ``property/MolecularWeight,XLogP``."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    @property
    def path(self) -> str:
        return "property/" + ",".join(self.names)


@dataclass(frozen=True)
class XrefsOperation:
    types: tuple[XrefType, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))

    @property
    def path(self) -> str:
        return "xrefs/" + ",".join(t.path for t in self.types)


@dataclass(frozen=True)
class TargetsOperation:
    target_type: AssayTargetType

    @property
    def path(self) -> str:
        return f"targets/{self.target_type.path}"


Operation = Union[
    CompoundOperation,
    SubstanceOperation,
    AssayOperation,
    BiologyOperation,
    PropertyOperation,
    XrefsOperation,
    TargetsOperation,
]


# ======================================================================
# URL assembly and execution
# ======================================================================

def render(tag: Domain | Namespace | Operation) -> str:
    """Fixed URL path segment(s) for a tag."""
    return tag.path


def join_identifiers(identifiers: Sequence[str | int]) -> str:
    """Join identifiers in order. No dedup, no validation."""
    return IDENTIFIER_SEPARATOR.join(str(i) for i in identifiers)


def build_query_url(
    domain: Domain,
    namespace: Namespace,
    identifiers: Sequence[str | int],
    operation: Operation,
    base_url: str = PUG_REST_URL,
) -> str:
    """Render the request URL. Identifiers are percent-encoded, separators kept."""
    ids = quote(join_identifiers(identifiers), safe=IDENTIFIER_SEPARATOR)
    return "/".join([base_url, render(domain), render(namespace), ids, render(operation), OUTPUT_FORMAT])


def pubchem_query(
    domain: Domain,
    namespace: Namespace,
    identifiers: Sequence[str | int],
    operation: Operation,
) -> str:
    """GET the query URL and return the raw body, whatever the HTTP status."""
    return http.get_text(build_query_url(domain, namespace, identifiers, operation))


# ======================================================================
# Parsing rendered tags (CLI input)
# ======================================================================

_NAMESPACES = {
    Domain.COMPOUND: CompoundNamespace,
    Domain.SUBSTANCE: SubstanceNamespace,
    Domain.ASSAY: AssayNamespace,
    Domain.GENE: GeneNamespace,
    Domain.PROTEIN: ProteinNamespace,
    Domain.PATHWAY: PathwayNamespace,
    Domain.TAXONOMY: TaxonomyNamespace,
    Domain.CELL: CellNamespace,
}

_OPERATIONS = {
    Domain.COMPOUND: CompoundOperation,
    Domain.SUBSTANCE: SubstanceOperation,
    Domain.ASSAY: AssayOperation,
}


def parse_namespace(domain: Domain, text: str) -> Namespace:
    """Inverse of render for a namespace of `domain`. Raises ValueError if unknown.

    Structure, fast and xref searches belong to the compound domain,
    ``sourceid``/``sourceall`` to substance (assays also take ``sourceall``),
    and ``type``/``target``/``activity`` to assay.
    """
    head, sep, rest = text.partition("/")
    if not sep:
        if text in {m.value for m in _NAMESPACES[domain]}:
            return _NAMESPACES[domain](text)
        if domain is Domain.COMPOUND and text == FastSearchKind.FAST_FORMULA.value:
            return FastSearch(FastSearchKind.FAST_FORMULA)
    elif domain is Domain.COMPOUND:
        if head in {m.value for m in StructureSearchKind}:
            return StructureSearch(StructureSearchKind(head), StructureInput(rest))
        if head in {m.value for m in FastSearchKind} and head != FastSearchKind.FAST_FORMULA.value:
            return FastSearch(FastSearchKind(head), StructureInput(rest))
        if head == "xref":
            return XrefSearch(XrefType(rest))
    elif domain is Domain.SUBSTANCE:
        if head in ("sourceid", "sourceall") and rest:
            return SourceNamespace(unquote(rest), every_record=head == "sourceall")
    elif domain is Domain.ASSAY:
        if head == "sourceall" and rest:
            return SourceNamespace(unquote(rest), every_record=True)
        if head == "type":
            return AssayTypeNamespace(AssayType(rest))
        if head == "target":
            return AssayTargetNamespace(AssayTargetType(rest))
        if head == "activity" and rest:
            return ActivityNamespace(unquote(rest))
    raise ValueError(f"Unknown {domain.value} namespace: {text!r}")


def parse_operation(domain: Domain, text: str) -> Operation:
    """Inverse of render for an operation of `domain`. Raises ValueError if unknown."""
    head, _, rest = text.partition("/")
    enum_cls = _OPERATIONS.get(domain, BiologyOperation)
    if text in {m.value for m in enum_cls}:
        return enum_cls(text)
    if head == "property" and rest:
        return PropertyOperation(tuple(rest.split(",")))
    if head == "xrefs" and rest:
        return XrefsOperation(tuple(XrefType(t) for t in rest.split(",")))
    if head == "targets" and rest:
        return TargetsOperation(AssayTargetType(rest))
    raise ValueError(f"Unknown {domain.value} operation: {text!r}")
