"""RCSB Data API response records.

Only the parts of an entry we use are modelled. ``PdbDataResults.from_dict``
takes the JSON of ``GET /rest/v1/core/entry/{id}``; a missing ``struct`` or
``rcsb_entry_info`` block raises KeyError, which callers report as a decode
failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional


def _pick(cls, data: dict) -> dict:
    """Keyword arguments for cls taken from data; absent keys are left to defaults."""
    return {f.name: data[f.name] for f in fields(cls) if f.name in data}


def _opt_int(value: Any) -> Optional[int]:
    """Integer from an int or a numeric string; None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class PdbStruct:
    title: str


@dataclass(frozen=True)
class Database2:
    database_code: str
    database_id: str


@dataclass(frozen=True)
class Cell:
    angle_alpha: Optional[float] = None
    angle_beta: Optional[float] = None
    angle_gamma: Optional[float] = None
    length_a: Optional[float] = None
    length_b: Optional[float] = None
    length_c: Optional[float] = None
    zpdb: Optional[int] = None


@dataclass(frozen=True)
class Citation:
    id: str
    journal_abbrev: Optional[str] = None
    country: Optional[str] = None
    journal_id_astm: Optional[str] = None
    journal_id_csd: Optional[str] = None
    journal_id_issn: Optional[str] = None
    journal_volume: Optional[int] = None
    # Page numbers are sometimes ints, sometimes strings like "e1234".
    page_first: Optional[str] = None
    page_last: Optional[str] = None
    pdbx_database_id_pub_med: Optional[int] = None
    rcsb_authors: tuple[str, ...] = ()
    rcsb_is_primary: Optional[str] = None
    rcsb_journal_abbrev: Optional[str] = None
    title: Optional[str] = None
    year: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Citation":
        kw = _pick(cls, data)
        kw["id"] = str(data["id"])
        kw["journal_volume"] = _opt_int(data.get("journal_volume"))
        kw["page_first"] = _opt_str(data.get("page_first"))
        kw["page_last"] = _opt_str(data.get("page_last"))
        kw["rcsb_authors"] = tuple(data.get("rcsb_authors") or ())
        return cls(**kw)


@dataclass(frozen=True)
class PdbxDatabaseStatus:
    deposit_site: Optional[str] = None
    pdb_format_compatible: Optional[str] = None
    process_site: Optional[str] = None
    recvd_initial_deposition_date: Optional[str] = None
    status_code: Optional[str] = None
    status_code_sf: Optional[str] = None
    sgentry: Optional[str] = None


@dataclass(frozen=True)
class RcsbEntryInfo:
    assembly_count: Optional[int] = None
    branched_entity_count: Optional[int] = None
    cis_peptide_count: Optional[int] = None
    deposited_atom_count: Optional[int] = None
    deposited_deuterated_water_count: Optional[int] = None
    deposited_hydrogen_atom_count: Optional[int] = None
    deposited_model_count: Optional[int] = None
    deposited_modeled_polymer_monomer_count: Optional[int] = None
    deposited_nonpolymer_entity_instance_count: Optional[int] = None
    deposited_polymer_entity_instance_count: Optional[int] = None
    deposited_polymer_monomer_count: Optional[int] = None
    deposited_solvent_atom_count: Optional[int] = None
    deposited_unmodeled_polymer_monomer_count: Optional[int] = None
    diffrn_radiation_wavelength_maximum: Optional[float] = None
    diffrn_radiation_wavelength_minimum: Optional[float] = None
    disulfide_bond_count: Optional[int] = None
    entity_count: Optional[int] = None
    experimental_method: Optional[str] = None
    experimental_method_count: Optional[int] = None
    inter_mol_covalent_bond_count: Optional[int] = None
    inter_mol_metalic_bond_count: Optional[int] = None
    molecular_weight: Optional[float] = None
    na_polymer_entity_types: Optional[str] = None
    nonpolymer_entity_count: Optional[int] = None
    nonpolymer_molecular_weight_maximum: Optional[float] = None
    nonpolymer_molecular_weight_minimum: Optional[float] = None
    polymer_composition: Optional[str] = None
    polymer_entity_count: Optional[int] = None
    polymer_entity_count_dna: Optional[int] = None
    polymer_entity_count_rna: Optional[int] = None
    polymer_entity_count_nucleic_acid: Optional[int] = None
    polymer_entity_count_nucleic_acid_hybrid: Optional[int] = None
    polymer_entity_count_protein: Optional[int] = None
    polymer_entity_taxonomy_count: Optional[int] = None
    polymer_molecular_weight_maximum: Optional[float] = None
    polymer_molecular_weight_minimum: Optional[float] = None
    polymer_monomer_count_maximum: Optional[int] = None
    polymer_monomer_count_minimum: Optional[int] = None
    resolution_combined: tuple[float, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "RcsbEntryInfo":
        kw = _pick(cls, data)
        kw["resolution_combined"] = tuple(data.get("resolution_combined") or ())
        return cls(**kw)


@dataclass(frozen=True)
class PdbDataResults:
    """Top-level record from the RCSB Data API entry endpoint."""

    struct: PdbStruct
    rcsb_entry_info: RcsbEntryInfo
    database2: tuple[Database2, ...] = ()
    cell: Optional[Cell] = None
    citation: tuple[Citation, ...] = ()
    pdbx_database_status: PdbxDatabaseStatus = field(default_factory=PdbxDatabaseStatus)

    @classmethod
    def from_dict(cls, data: dict) -> "PdbDataResults":
        cell = data.get("cell")
        return cls(
            struct=PdbStruct(title=data["struct"]["title"]),
            rcsb_entry_info=RcsbEntryInfo.from_dict(data["rcsb_entry_info"]),
            database2=tuple(
                Database2(database_code=d["database_code"], database_id=d["database_id"])
                for d in data.get("database2") or ()
            ),
            cell=Cell(**_pick(Cell, cell)) if cell else None,
            citation=tuple(Citation.from_dict(c) for c in data.get("citation") or ()),
            pdbx_database_status=PdbxDatabaseStatus(**_pick(PdbxDatabaseStatus, data.get("pdbx_database_status") or {})),
        )

    @property
    def emdb_code(self) -> Optional[str]:
        """EMDB accession (e.g. ``EMD-39757``) when the entry has a deposited map."""
        for db in self.database2:
            if db.database_id == "EMDB":
                return db.database_code
        return None


@dataclass(frozen=True)
class PdbMetaData:
    prim_cit_title: str

    @classmethod
    def from_dict(cls, data: dict) -> "PdbMetaData":
        return cls(prim_cit_title=data["rcsb_primary_citation"]["title"])


@dataclass(frozen=True)
class PdbData:
    rcsb_id: str
    title: str


@dataclass(frozen=True)
class FilesAvailable:
    validation: bool
    validation_2fo_fc: bool
    validation_fo_fc: bool
    structure_factors: bool
    map: bool
