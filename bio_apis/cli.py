from __future__ import annotations

from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import List, Optional

import typer
from tqdm import tqdm

from bio_apis import amber_geostd, drugbank, lmsd, pdbe, pubchem, rcsb
from bio_apis.core.errors import ReqError
from bio_apis.core.logging_utils import get_logger
from bio_apis.core.tables import save_table
from bio_apis.pubchem.query import Domain, parse_namespace, parse_operation

logger = get_logger(__name__)
app = typer.Typer(no_args_is_help=True)

pubchem_app = typer.Typer(no_args_is_help=True)
rcsb_app = typer.Typer(no_args_is_help=True)
drugbank_app = typer.Typer(no_args_is_help=True)
lmsd_app = typer.Typer(no_args_is_help=True)
pdbe_app = typer.Typer(no_args_is_help=True)
geostd_app = typer.Typer(no_args_is_help=True)

app.add_typer(pubchem_app, name="pubchem")
app.add_typer(rcsb_app, name="rcsb")
app.add_typer(drugbank_app, name="drugbank")
app.add_typer(lmsd_app, name="lmsd")
app.add_typer(pdbe_app, name="pdbe")
app.add_typer(geostd_app, name="geostd")


class RcsbView(str, Enum):
    overview = "overview"
    view_3d = "3d"
    structure = "structure"


def _fail(err: ReqError) -> typer.Exit:
    logger.error("%s", err)
    return typer.Exit(code=1)


def _emit(text: str, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text)
    logger.info("Wrote %s (%d chars)", out, len(text))


def _emit_table(records: list, table: Optional[Path]) -> None:
    if table is not None:
        count = save_table(records, table)
        logger.info("Wrote %s (rows=%d)", table, count)
        return
    for r in records:
        typer.echo(r)


def _download_sdfs(source: ModuleType, idents: List[str], out_dir: Path) -> None:
    """Fetch one SDF per ident, in sequence. Failures are logged and skipped."""
    out_dir.mkdir(parents=True, exist_ok=True)
    failed = 0
    for ident in tqdm(idents, unit="file", desc=source.__name__.rsplit(".", 1)[-1]):
        try:
            text = source.load_sdf(ident)
        except ReqError as e:
            logger.warning("Failed %s: %s", ident, e)
            failed += 1
            continue
        (out_dir / f"{ident}.sdf").write_text(text)
    if failed:
        logger.warning("Download finished with %d failures (of %d)", failed, len(idents))


# --- PubChem ---------------------------------------------------------------

@pubchem_app.command("sdf")
def pubchem_sdf(
    cid: int = typer.Argument(..., help="PubChem compound ID."),
    out: Optional[Path] = typer.Option(None, help="Write the SDF here instead of stdout."),
):
    try:
        _emit(pubchem.load_sdf(cid), out)
    except ReqError as e:
        raise _fail(e)


@pubchem_app.command("similar")
def pubchem_similar(cid: int = typer.Argument(..., help="PubChem compound ID.")):
    """CIDs with a similar 3D shape."""
    try:
        cids = pubchem.find_similar_cids(cid)
    except ReqError as e:
        raise _fail(e)
    typer.echo(",".join(str(c) for c in cids))


@pubchem_app.command("cids")
def pubchem_cids(name: str = typer.Argument(..., help="Compound name.")):
    """CIDs of compounds matching a name."""
    try:
        cids = pubchem.find_cids_by_name(name)
    except ReqError as e:
        raise _fail(e)
    typer.echo(",".join(str(c) for c in cids))


@pubchem_app.command("query")
def pubchem_query(
    domain: Domain = typer.Argument(..., help="PUG-REST domain."),
    namespace: str = typer.Argument(..., help="Namespace, e.g. cid, name, fastsimilarity_2d/smiles."),
    identifiers: List[str] = typer.Argument(..., help="Identifiers, joined with ','."),
    operation: str = typer.Option("record", help="Operation, e.g. synonyms, property/MolecularWeight."),
):
    """Run a raw PUG-REST query and print the JSON body."""
    try:
        ns = parse_namespace(domain, namespace)
        op = parse_operation(domain, operation)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    try:
        typer.echo(pubchem.pubchem_query(domain, ns, identifiers, op))
    except ReqError as e:
        raise _fail(e)


@pubchem_app.command("open")
def pubchem_open(cid: int = typer.Argument(..., help="PubChem compound ID.")):
    pubchem.open_overview(cid)


# --- RCSB ------------------------------------------------------------------

@rcsb_app.command("cif")
def rcsb_cif(
    ident: str = typer.Argument(..., help="PDB ID."),
    out: Optional[Path] = typer.Option(None, help="Write the mmCIF here instead of stdout."),
):
    try:
        _emit(rcsb.load_cif(ident), out)
    except ReqError as e:
        raise _fail(e)


@rcsb_app.command("files")
def rcsb_files(ident: str = typer.Argument(..., help="PDB ID.")):
    """Report which validation, structure factor and map files exist."""
    try:
        avail = rcsb.get_files_avail(ident)
    except ReqError as e:
        raise _fail(e)
    for name, present in vars(avail).items():
        typer.echo(f"{name}\t{'yes' if present else 'no'}")


@rcsb_app.command("meta")
def rcsb_meta(ident: str = typer.Argument(..., help="PDB ID.")):
    try:
        data = rcsb.get_all_data(ident)
    except ReqError as e:
        raise _fail(e)
    typer.echo(data.struct.title)
    info = data.rcsb_entry_info
    typer.echo(f"method={info.experimental_method} resolution={list(info.resolution_combined)}")


@rcsb_app.command("seq")
def rcsb_seq(
    sequence: str = typer.Argument(..., help="Amino-acid sequence, one-letter codes."),
    table: Optional[Path] = typer.Option(None, help="Write hits to .csv or .parquet."),
):
    """Entries matching a protein sequence (first 8 hits)."""
    try:
        hits = rcsb.pdb_data_from_seq(sequence)
    except ReqError as e:
        raise _fail(e)
    _emit_table(hits, table)


@rcsb_app.command("newest")
def rcsb_newest():
    """A random entry released in the past week."""
    try:
        typer.echo(rcsb.get_newly_released())
    except ReqError as e:
        raise _fail(e)


@rcsb_app.command("open")
def rcsb_open(
    ident: str = typer.Argument(..., help="PDB ID."),
    view: RcsbView = typer.Option(RcsbView.overview, help="Page to open."),
):
    if view == RcsbView.view_3d:
        rcsb.open_3d_view(ident)
    elif view == RcsbView.structure:
        rcsb.open_structure(ident)
    else:
        rcsb.open_overview(ident)


# --- DrugBank / LIPID MAPS / PDBe ------------------------------------------

@drugbank_app.command("sdf")
def drugbank_sdf(
    idents: List[str] = typer.Argument(..., help="DrugBank IDs, e.g. DB00945."),
    out_dir: Path = typer.Option(Path("."), help="Output directory."),
):
    _download_sdfs(drugbank, idents, out_dir)


@drugbank_app.command("open")
def drugbank_open(ident: str = typer.Argument(..., help="DrugBank ID.")):
    drugbank.open_overview(ident)


@lmsd_app.command("sdf")
def lmsd_sdf(
    idents: List[str] = typer.Argument(..., help="LIPID MAPS IDs, e.g. LMFA01010001."),
    out_dir: Path = typer.Option(Path("."), help="Output directory."),
):
    _download_sdfs(lmsd, idents, out_dir)


@lmsd_app.command("open")
def lmsd_open(ident: str = typer.Argument(..., help="LIPID MAPS ID.")):
    lmsd.open_overview(ident)


@pdbe_app.command("sdf")
def pdbe_sdf(
    idents: List[str] = typer.Argument(..., help="Chemical component IDs, e.g. ATP."),
    out_dir: Path = typer.Option(Path("."), help="Output directory."),
):
    _download_sdfs(pdbe, idents, out_dir)


@pdbe_app.command("open")
def pdbe_open(ident: str = typer.Argument(..., help="Chemical component ID.")):
    pdbe.open_overview(ident)


# --- Amber GeoStd ----------------------------------------------------------

@geostd_app.command("list")
def geostd_list(table: Optional[Path] = typer.Option(None, help="Write the catalog to .csv or .parquet.")):
    try:
        items = amber_geostd.get_all_mols()
    except ReqError as e:
        raise _fail(e)
    _emit_table(items, table)


@geostd_app.command("find")
def geostd_find(
    text: str = typer.Argument(..., help="Search keyword."),
    table: Optional[Path] = typer.Option(None, help="Write matches to .csv or .parquet."),
):
    try:
        items = amber_geostd.find_mols(text)
    except ReqError as e:
        raise _fail(e)
    _emit_table(items, table)


@geostd_app.command("load")
def geostd_load(
    ident: str = typer.Argument(..., help="GeoStd / PDBe code or PubChem CID."),
    out_dir: Path = typer.Option(Path("."), help="Output directory."),
):
    """Save the Mol2 file, plus FRCMOD and lib when available."""
    try:
        data = amber_geostd.load_mol_files(ident)
    except ReqError as e:
        raise _fail(e)
    out_dir.mkdir(parents=True, exist_ok=True)
    for suffix, text in (("mol2", data.mol2), ("frcmod", data.frcmod), ("lib", data.lib)):
        if text is None:
            continue
        (out_dir / f"{ident}.{suffix}").write_text(text)
    logger.info("Saved GeoStd files for %s to %s", ident, out_dir)


if __name__ == "__main__":
    app()
