"""RCSB Search API v2 payload types, builders and result parsing.

Payloads are dataclasses whose ``to_dict`` output is the JSON body sent to
https://search.rcsb.org/rcsbsearch/v2/query. Optional fields left as None are
omitted from the body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

SEARCH_URL = "https://search.rcsb.org/rcsbsearch/v2/query"

# Cap on hits kept from a search, to bound follow-up Data API calls.
MAX_RESULTS = 8


class Operator(str, Enum):
    EXACT_MATCH = "exact_match"
    EXISTS = "exists"
    GREATER = "greater"
    LESS = "less"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"
    EQUALS = "equals"
    CONTAINS_PHRASE = "contains_phrase"
    CONTAINS_WORDS = "contains_words"
    RANGE = "range"
    IN = "in"


class ReturnType(str, Enum):
    ENTRY = "entry"
    ASSEMBLY = "assembly"
    POLYMER_ENTITY = "polymer_entity"
    NON_POLYMER_ENTITY = "non_polymer_entity"
    POLYMER_INSTANCE = "polymer_instance"
    MOL_DEFINITION = "mol_definition"


class NodeType(str, Enum):
    TERMINAL = "terminal"
    GROUP = "group"


class Service(str, Enum):
    TEXT = "text"
    FULL_TEXT = "full_text"
    TEXT_CHEM = "text_chem"
    STRUCTURE = "structure"
    STRUC_MOTIF = "strucmotif"
    SEQUENCE = "sequence"
    SEQ_MOTIF = "seqmotif"
    CHEMICAL = "chemical"


def _compact(d: dict) -> dict:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in d.items() if v is not None}


@dataclass
class SearchParams:
    value: Optional[Any] = None
    # "protein", "dna", "rna"
    sequence_type: Optional[str] = None
    evalue_cutoff: Optional[float] = None
    identity_cutoff: Optional[float] = None
    operator: Optional[Operator] = None
    # https://search.rcsb.org/structure-search-attributes.html
    attribute: Optional[str] = None
    pattern: Optional[str] = None

    def to_dict(self) -> dict:
        return _compact({
            "value": self.value,
            "sequence_type": self.sequence_type,
            "evalue_cutoff": self.evalue_cutoff,
            "identity_cutoff": self.identity_cutoff,
            "operator": self.operator,
            "attribute": self.attribute,
            "pattern": self.pattern,
        })


@dataclass
class SearchQuery:
    type: NodeType = NodeType.TERMINAL
    service: Service = Service.TEXT
    parameters: SearchParams = field(default_factory=SearchParams)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "service": self.service.value,
            "parameters": self.parameters.to_dict(),
        }


@dataclass
class Sort:
    sort_by: str
    direction: str = "desc"
    random_seed: Optional[int] = None

    def to_dict(self) -> dict:
        return _compact({"sort_by": self.sort_by, "direction": self.direction, "random_seed": self.random_seed})


@dataclass
class Paginate:
    start: int = 0
    rows: int = 10

    def to_dict(self) -> dict:
        return {"start": self.start, "rows": self.rows}


@dataclass
class RequestOptions:
    # "sequence", "seqmotif", "strucmotif", "structure", "chemical" or "text"
    scoring_strategy: Optional[str] = None
    sort: Optional[list[Sort]] = None
    paginate: Optional[Paginate] = None

    def to_dict(self) -> dict:
        return _compact({
            "scoring_strategy": self.scoring_strategy,
            "sort": [s.to_dict() for s in self.sort] if self.sort is not None else None,
            "paginate": self.paginate.to_dict() if self.paginate is not None else None,
        })


@dataclass
class SearchPayload:
    query: SearchQuery = field(default_factory=SearchQuery)
    return_type: ReturnType = ReturnType.ENTRY
    request_options: Optional[RequestOptions] = None
    request_info: Optional[str] = None

    def to_dict(self) -> dict:
        return _compact({
            "return_type": self.return_type,
            "query": self.query.to_dict(),
            "request_options": self.request_options.to_dict() if self.request_options is not None else None,
            "request_info": self.request_info,
        })


# ======================================================================
# Results
# ======================================================================

@dataclass(frozen=True)
class SearchResult:
    identifier: str
    score: float


@dataclass(frozen=True)
class SearchResults:
    query_id: str
    result_type: str
    total_count: int
    result_set: tuple[SearchResult, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "SearchResults":
        return cls(
            query_id=data["query_id"],
            result_type=data["result_type"],
            total_count=int(data["total_count"]),
            result_set=tuple(
                SearchResult(identifier=r["identifier"], score=float(r["score"]))
                for r in data["result_set"]
            ),
        )

    @classmethod
    def empty(cls, return_type: ReturnType) -> "SearchResults":
        return cls(query_id="", result_type=return_type.value, total_count=0)

    def top(self, limit: int = MAX_RESULTS) -> list[SearchResult]:
        """First `limit` hits, in server order."""
        return list(self.result_set[:limit])


# ======================================================================
# Payload builders
# ======================================================================

def sequence_payload(
    sequence: str,
    sequence_type: str = "protein",
    evalue_cutoff: float = 1,
    identity_cutoff: float = 0.9,
) -> SearchPayload:
    return SearchPayload(
        query=SearchQuery(
            service=Service.SEQUENCE,
            parameters=SearchParams(
                value=sequence,
                sequence_type=sequence_type,
                evalue_cutoff=evalue_cutoff,
                identity_cutoff=identity_cutoff,
            ),
        ),
        request_options=RequestOptions(scoring_strategy="sequence"),
    )


def attribute_payload(attribute: str, operator: Operator, value: Any) -> SearchPayload:
    return SearchPayload(
        query=SearchQuery(
            service=Service.TEXT,
            parameters=SearchParams(attribute=attribute, operator=operator, value=value),
        ),
    )


def newly_released_payload(window: str = "now-1w") -> SearchPayload:
    """Entries first released after `window` (https://search.rcsb.org/#search-example-12)."""
    return attribute_payload("rcsb_accession_info.initial_release_date", Operator.GREATER, window)


def full_text_payload(keyword: str) -> SearchPayload:
    return SearchPayload(
        query=SearchQuery(service=Service.FULL_TEXT, parameters=SearchParams(value=keyword)),
    )
