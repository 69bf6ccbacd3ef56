"""Tests for RCSB download URLs."""

import pytest

from bio_apis.core.errors import LocalIOError
from bio_apis.rcsb import urls


def test_cif_urls() -> None:
    assert urls.cif_url("4hhb") == "https://files.rcsb.org/download/4HHB.cif"
    assert urls.cif_gz_url("4hhb") == "https://files.rcsb.org/download/4HHB.cif.gz"


def test_structure_factor_urls() -> None:
    assert urls.structure_factors_cif_url("1abc") == "https://files.rcsb.org/download/1ABC-sf.cif"
    assert urls.structure_factors_cif_gz_url("1abc") == "https://files.rcsb.org/download/1ABC-sf.cif.gz"


def test_validation_urls() -> None:
    base = "https://files.rcsb.org/validation/download/4HHB_validation"
    assert urls.validation_base_url("4HHB") == base
    assert urls.validation_cif_gz_url("4HHB") == base + ".cif.gz"
    assert urls.validation_2fo_fc_cif_gz_url("4HHB") == base + "_2fo-fc_map_coef.cif.gz"
    assert urls.validation_fo_fc_cif_gz_url("4HHB") == base + "_fo-fc_map_coef.cif.gz"


def test_validation_url_keeps_ident_case() -> None:
    assert urls.validation_base_url("4hhb") == "https://files.rcsb.org/validation/download/4hhb_validation"


@pytest.mark.parametrize("ident", ["", "4", "4H"])
def test_validation_url_rejects_short_ids(ident: str) -> None:
    with pytest.raises(LocalIOError, match=">= 3 characters"):
        urls.validation_cif_gz_url(ident)


def test_emdb_map_url() -> None:
    assert urls.emdb_map_gz_url("EMD-39757") == (
        "https://files.rcsb.org/pub/emdb/structures/EMD-39757/map/emd_39757.map.gz"
    )


def test_browser_urls() -> None:
    assert urls.overview_url("4HHB") == "https://www.rcsb.org/structure/4HHB"
    assert urls.view_3d_url("4HHB") == "https://www.rcsb.org/3d-view/4HHB"
    assert urls.structure_view_url("4HHB") == "https://files.rcsb.org/view/4HHB.cif"
