"""Tests for RCSB API client."""

from __future__ import annotations

import gzip
import json

import pytest

from bio_apis.core import http
from bio_apis.core.errors import DecodeError, LocalIOError, ReqError, TransportError
from bio_apis.rcsb import data_api
from bio_apis.rcsb.client import DATA_API_URL, RCSBClient
from bio_apis.rcsb.models import FilesAvailable
from bio_apis.rcsb.search import SEARCH_URL, full_text_payload


def _entry(title: str, emdb: str | None = None) -> dict:
    database2 = [{"database_code": "4HHB", "database_id": "PDB"}]
    if emdb:
        database2.append({"database_code": emdb, "database_id": "EMDB"})
    return {
        "struct": {"title": title},
        "database2": database2,
        "citation": [{
            "id": "primary",
            "journal_abbrev": "J.Mol.Biol.",
            "journal_volume": "175",
            "page_first": 159,
            "page_last": "174",
            "rcsb_authors": ["Fermi, G.", "Perutz, M.F."],
            "rcsb_is_primary": "Y",
            "rcsb_journal_abbrev": "J Mol Biol",
            "title": "The crystal structure of human deoxyhaemoglobin",
            "year": 1984,
        }],
        "cell": {"angle_alpha": 90.0, "length_a": 63.15, "zpdb": 4},
        "pdbx_database_status": {"status_code": "REL", "process_site": "BNL"},
        "rcsb_entry_info": {
            "experimental_method": "X-ray",
            "deposited_deuterated_water_count": 0,
            "molecular_weight": 64.74,
            "polymer_entity_count_protein": 2,
            "resolution_combined": [1.74],
        },
        "rcsb_primary_citation": {"title": "The crystal structure of human deoxyhaemoglobin"},
    }


def _search_body(n: int) -> str:
    return json.dumps({
        "query_id": "q",
        "result_type": "entry",
        "total_count": n,
        "result_set": [{"identifier": f"{i}ABC", "score": 1.0} for i in range(n)],
    })


class FakeServer:
    """Routes GET/POST/HEAD by URL; records every request."""

    def __init__(self) -> None:
        self.get_bodies: dict[str, str] = {}
        self.post_body = _search_body(0)
        self.head_status: dict[str, int] = {}
        self.raw: dict[str, bytes] = {}
        self.requests: list[tuple[str, str]] = []

    def get_text(self, url, timeout=None):
        self.requests.append(("GET", url))
        if url not in self.get_bodies:
            raise TransportError("connection refused", url=url)
        return self.get_bodies[url]

    def post_text(self, url, payload, timeout=None):
        self.requests.append(("POST", url))
        self.last_payload = payload
        return self.post_body

    def request(self, url, method="GET", data=None, timeout=None):
        self.requests.append((method, url))
        if method == "HEAD":
            return self.head_status.get(url, 404), b""
        return 200, self.raw[url]


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    fake = FakeServer()
    monkeypatch.setattr(http, "get_text", fake.get_text)
    monkeypatch.setattr(http, "post_text", fake.post_text)
    monkeypatch.setattr(http, "_request", fake.request)
    return fake


# -- Data API ----------------------------------------------------------------


def test_get_all_data(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/4HHB"] = json.dumps(_entry("DEOXY HUMAN HAEMOGLOBIN"))
    data = RCSBClient().get_all_data("4hhb")
    assert data.struct.title == "DEOXY HUMAN HAEMOGLOBIN"
    assert data.rcsb_entry_info.experimental_method == "X-ray"
    assert data.rcsb_entry_info.resolution_combined == (1.74,)
    assert data.rcsb_entry_info.deposited_deuterated_water_count == 0
    assert data.cell is not None and data.cell.zpdb == 4
    cit = data.citation[0]
    assert cit.journal_volume == 175
    assert cit.page_first == "159"
    assert cit.rcsb_authors == ("Fermi, G.", "Perutz, M.F.")
    assert data.pdbx_database_status.status_code == "REL"
    assert data.emdb_code is None


def test_get_all_data_unexpected_shape(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/XXXX"] = json.dumps({"status": 404, "message": "No data found"})
    with pytest.raises(DecodeError):
        RCSBClient().get_all_data("XXXX")


def test_load_metadata(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/4HHB"] = json.dumps(_entry("x"))
    meta = RCSBClient().load_metadata("4HHB")
    assert meta.prim_cit_title == "The crystal structure of human deoxyhaemoglobin"


def test_map_gz_url(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/8YXZ"] = json.dumps(_entry("cryo-EM", emdb="EMD-39757"))
    assert RCSBClient().map_gz_url("8YXZ") == (
        "https://files.rcsb.org/pub/emdb/structures/EMD-39757/map/emd_39757.map.gz"
    )


def test_map_gz_url_without_emdb(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/4HHB"] = json.dumps(_entry("x-ray"))
    with pytest.raises(TransportError, match="No EMDB map"):
        RCSBClient().map_gz_url("4HHB")


# -- Search ------------------------------------------------------------------


def test_search_posts_payload(server: FakeServer) -> None:
    server.post_body = _search_body(2)
    res = RCSBClient().search(full_text_payload("kinase"))
    assert res.total_count == 2
    assert server.requests == [("POST", SEARCH_URL)]
    assert server.last_payload["query"]["service"] == "full_text"


def test_pdb_data_from_seq_truncates_to_eight(server: FakeServer) -> None:
    server.post_body = _search_body(20)
    for i in range(20):
        server.get_bodies[f"{DATA_API_URL}/{i}ABC"] = json.dumps(_entry(f"title {i}"))

    hits = RCSBClient().pdb_data_from_seq("MVLSPADKTNVKAAW")

    assert [h.rcsb_id for h in hits] == [f"{i}ABC" for i in range(8)]
    assert [h.title for h in hits] == [f"title {i}" for i in range(8)]
    gets = [url for method, url in server.requests if method == "GET"]
    assert len(gets) == 8
    assert server.last_payload["query"]["parameters"]["value"] == "MVLSPADKTNVKAAW"


def test_pdb_data_from_seq_accepts_residue_iterable(server: FakeServer) -> None:
    server.post_body = _search_body(0)
    assert RCSBClient().pdb_data_from_seq(["M", "V", "L"]) == []
    assert server.last_payload["query"]["parameters"]["value"] == "MVL"


def test_pdb_data_from_seq_detail_failure_aborts(server: FakeServer) -> None:
    server.post_body = _search_body(5)
    for i in (0, 1, 3, 4):
        server.get_bodies[f"{DATA_API_URL}/{i}ABC"] = json.dumps(_entry(f"title {i}"))
    with pytest.raises(TransportError):
        RCSBClient().pdb_data_from_seq("MVL")
    gets = [url for method, url in server.requests if method == "GET"]
    assert gets[-1] == f"{DATA_API_URL}/2ABC"


def test_get_newly_released(server: FakeServer) -> None:
    server.post_body = _search_body(4)
    assert RCSBClient().get_newly_released() in {"0ABC", "1ABC", "2ABC", "3ABC"}
    assert server.last_payload["query"]["parameters"]["value"] == "now-1w"


def test_get_newly_released_empty(server: FakeServer) -> None:
    server.post_body = _search_body(0)
    with pytest.raises(TransportError):
        RCSBClient().get_newly_released()


def test_no_hits_answered_with_empty_204(monkeypatch) -> None:
    requests = []

    def fake_request(url, method="GET", data=None, timeout=None):
        requests.append((method, url))
        return 204, b""

    monkeypatch.setattr(http, "_request", fake_request)
    client = RCSBClient()

    res = client.search(full_text_payload("no such protein"))
    assert res.total_count == 0
    assert res.result_set == ()
    assert res.result_type == "entry"
    assert client.pdb_data_from_seq("MVL") == []
    with pytest.raises(TransportError, match="No entries released"):
        client.get_newly_released()
    assert requests == [("POST", SEARCH_URL)] * 3


def test_search_malformed_body(server: FakeServer) -> None:
    server.post_body = "<html>Service Unavailable</html>"
    with pytest.raises(DecodeError):
        RCSBClient().search(full_text_payload("kinase"))


# -- Files -------------------------------------------------------------------


def test_load_cif_decompresses(server: FakeServer) -> None:
    server.raw["https://files.rcsb.org/download/4HHB.cif.gz"] = gzip.compress(b"data_4HHB\n#\n")
    assert RCSBClient().load_cif("4hhb") == "data_4HHB\n#\n"


def test_load_validation_variants(server: FakeServer) -> None:
    base = "https://files.rcsb.org/validation/download/4HHB_validation"
    server.raw[base + ".cif.gz"] = gzip.compress(b"validation")
    server.raw[base + "_2fo-fc_map_coef.cif.gz"] = gzip.compress(b"2fo-fc")
    server.raw[base + "_fo-fc_map_coef.cif.gz"] = gzip.compress(b"fo-fc")
    client = RCSBClient()
    assert client.load_validation_cif("4HHB") == "validation"
    assert client.load_validation_2fo_fc_cif("4HHB") == "2fo-fc"
    assert client.load_validation_fo_fc_cif("4HHB") == "fo-fc"


def test_load_validation_short_id(server: FakeServer) -> None:
    with pytest.raises(LocalIOError):
        RCSBClient().load_validation_cif("4H")
    assert server.requests == []


def test_load_structure_factors(server: FakeServer) -> None:
    server.raw["https://files.rcsb.org/download/1ABC-sf.cif.gz"] = gzip.compress(b"data_r1abcsf\n")
    assert RCSBClient().load_structure_factors_cif("1abc") == "data_r1abcsf\n"


def test_load_map_returns_bytes(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/8YXZ"] = json.dumps(_entry("cryo-EM", emdb="EMD-39757"))
    payload = bytes(range(256))
    server.raw["https://files.rcsb.org/pub/emdb/structures/EMD-39757/map/emd_39757.map.gz"] = gzip.compress(payload)
    assert RCSBClient().load_map("8YXZ") == payload


def test_get_files_avail(server: FakeServer) -> None:
    base = "https://files.rcsb.org/validation/download/8YXZ_validation"
    server.get_bodies[f"{DATA_API_URL}/8YXZ"] = json.dumps(_entry("cryo-EM", emdb="EMD-39757"))
    server.head_status[base + ".cif.gz"] = 200
    server.head_status[base + "_2fo-fc_map_coef.cif.gz"] = 404
    server.head_status["https://files.rcsb.org/download/8YXZ-sf.cif"] = 403
    server.head_status["https://files.rcsb.org/pub/emdb/structures/EMD-39757/map/emd_39757.map.gz"] = 200

    avail = RCSBClient().get_files_avail("8YXZ")

    assert avail == FilesAvailable(
        validation=True,
        validation_2fo_fc=False,
        validation_fo_fc=False,
        structure_factors=False,
        map=True,
    )


def test_get_files_avail_without_map(server: FakeServer) -> None:
    server.get_bodies[f"{DATA_API_URL}/4HHB"] = json.dumps(_entry("x-ray"))
    avail = RCSBClient().get_files_avail("4HHB")
    assert avail.map is False
    heads = [url for method, url in server.requests if method == "HEAD"]
    assert len(heads) == 4


def test_get_files_avail_short_id(server: FakeServer) -> None:
    with pytest.raises(LocalIOError, match="too short"):
        RCSBClient().get_files_avail("4H")
    assert server.requests == []


# -- Module-level helpers ------------------------------------------------------


def test_data_api_reuses_default_client(server: FakeServer, monkeypatch) -> None:
    monkeypatch.setattr(data_api, "_default_client", None)
    server.get_bodies[f"{DATA_API_URL}/4HHB"] = json.dumps(_entry("DEOXY"))
    assert data_api.get_all_data("4HHB").struct.title == "DEOXY"
    first = data_api._default_client
    data_api.load_metadata("4HHB")
    assert data_api._default_client is first


# -- Live -----------------------------------------------------------------------


def test_get_all_data_live() -> None:
    """Fetch 4HHB entry from RCSB Data API (requires network)."""
    client = RCSBClient(timeout=10)
    try:
        data = client.get_all_data("4HHB")
    except ReqError:
        pytest.skip("RCSB API unreachable (no network or API down)")

    assert "HAEMOGLOBIN" in data.struct.title.upper()
    assert data.rcsb_entry_info.experimental_method
