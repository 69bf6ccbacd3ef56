#!/usr/bin/env python3
"""Find PDB entries for a protein sequence and check which extra files they have.

Usage:
    python examples/search_by_sequence.py MVLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF
    python examples/search_by_sequence.py <SEQ> --table hits.parquet
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import asdict
from pathlib import Path

from bio_apis.core.errors import ReqError
from bio_apis.core.tables import save_table
from bio_apis.rcsb import RCSBClient

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    p = argparse.ArgumentParser(description="RCSB sequence search with file availability")
    p.add_argument("sequence", help="Amino-acid sequence, one-letter codes")
    p.add_argument("--table", default=None, help="Write results to .csv or .parquet")
    p.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    args = p.parse_args()

    client = RCSBClient(timeout=args.timeout)
    hits = client.pdb_data_from_seq(args.sequence)
    logger.info("%d entries match", len(hits))

    rows = []
    for hit in hits:
        row = asdict(hit)
        try:
            row.update(asdict(client.get_files_avail(hit.rcsb_id)))
        except ReqError as e:
            logger.warning("Availability check failed for %s: %s", hit.rcsb_id, e)
        rows.append(row)
        print(f"{hit.rcsb_id}\t{hit.title}")

    if args.table:
        save_table(rows, Path(args.table))
        logger.info("Wrote %s", args.table)


if __name__ == "__main__":
    main()
