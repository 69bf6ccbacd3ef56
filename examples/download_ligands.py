#!/usr/bin/env python3
"""Download ligand SDFs from PubChem for a compound name and its 3D neighbours.

Usage:
    python examples/download_ligands.py aspirin --out ligands/
    python examples/download_ligands.py aspirin --out ligands/ --max-similar 20
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from bio_apis import pubchem
from bio_apis.core.errors import ReqError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    p = argparse.ArgumentParser(description="Fetch PubChem 3D SDFs for a name and similar compounds")
    p.add_argument("name", help="Compound name, e.g. aspirin")
    p.add_argument("--out", default="ligands", help="Output directory")
    p.add_argument("--max-similar", type=int, default=10, help="Similar compounds to keep per match")
    args = p.parse_args()

    out = Path(args.out)
    out.mkdir(parents=True, exist_ok=True)

    cids: list[int] = []
    for cid in pubchem.find_cids_by_name(args.name):
        cids.append(cid)
        cids.extend(c for c in pubchem.find_similar_cids(cid)[: args.max_similar] if c != cid)
    cids = list(dict.fromkeys(cids))
    logger.info("Downloading %d SDFs to %s", len(cids), out)

    for cid in tqdm(cids, unit="file"):
        try:
            (out / f"{cid}.sdf").write_text(pubchem.load_sdf(cid))
        except ReqError as e:
            logger.warning("Skipping %s: %s", cid, e)


if __name__ == "__main__":
    main()
