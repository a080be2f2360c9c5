import requests

from conftest import DummyFetcher, DummyResponse, build_zip, mark_encrypted
from feed_ingest.core.errors import InvalidURL
from feed_ingest.core.scraping.artifact import TransientArtifact
from feed_ingest.core.scraping.fetcher import Fetcher
from feed_ingest.flows.feed_flow import feed_ingest_flow

BASE = "http://feed.example.org/posts/"


def job_payload(tmp_path, **extra):
    cfg = {
        "job_name": "test_job",
        "environment": "dev",
        "catalog": {"base_url": BASE},
        "destination_bucket": str(tmp_path / "bucket"),
        "destination_path": "datalake",
        "execution_date": "2026-10-19",
    }
    cfg.update(extra)
    return cfg


def test_flow_skips_bad_urls_and_disposes_artifacts(monkeypatch, tmp_path):
    created = []

    def fake_fetch(url, fetcher_config):
        if url == "bad":
            raise InvalidURL(url)
        if url.endswith("down.xml"):
            raise requests.ConnectionError("refused")
        artifact = TransientArtifact.create(url, suffix=".xml", dir=str(tmp_path))
        created.append(artifact)
        return artifact

    monkeypatch.setattr(
        "feed_ingest.flows.feed_flow.fetch_listing_task", lambda cfg: "<html/>"
    )
    monkeypatch.setattr(
        "feed_ingest.flows.feed_flow.list_catalog_urls_task",
        lambda html, cfg, max_urls=None: ["bad", BASE + "down.xml", BASE + "1.zip"],
    )
    monkeypatch.setattr("feed_ingest.flows.feed_flow.fetch_resource_task", fake_fetch)
    monkeypatch.setattr(
        "feed_ingest.flows.feed_flow.store_artifact_task",
        lambda artifact, storage, bucket, path: f"{bucket}/{path}/1.xml",
    )

    result = feed_ingest_flow(job_payload(tmp_path))

    assert result == [
        f"{tmp_path / 'bucket'}/datalake/raw/test_job/data_captura=2026-10-19/1.xml"
    ]
    assert len(created) == 1
    assert created[0].disposed


def test_flow_end_to_end_with_local_storage(monkeypatch, tmp_path):
    listing = (
        "<table>"
        "<tr><td><a>1.zip</a></td></tr>"
        "<tr><td><a>2.xml</a></td></tr>"
        "<tr><td><a>3.txt</a></td></tr>"
        "</table>"
    )
    http = DummyFetcher(
        {
            BASE: DummyResponse(text=listing),
            BASE + "1.zip": build_zip([("data.xml", b"<one/>")]),
            BASE + "2.xml": b"<two/>",
        }
    )
    monkeypatch.setattr(Fetcher, "get", lambda self, url, **kw: http.get(url))
    monkeypatch.setattr(
        Fetcher, "stream_get", lambda self, url, **kw: http.stream_get(url)
    )

    result = feed_ingest_flow(
        job_payload(tmp_path, fetcher={"temp_dir": str(tmp_path)})
    )

    out = tmp_path / "bucket" / "datalake" / "raw" / "test_job" / "data_captura=2026-10-19"
    assert result == [str(out / "1.xml"), str(out / "2.xml")]
    assert (out / "1.xml").read_bytes() == b"<one/>"
    assert (out / "2.xml").read_bytes() == b"<two/>"
    # .txt was rejected before any download
    assert BASE + "3.txt" not in http.calls
    # no transient files left behind
    assert sorted(p.name for p in tmp_path.iterdir()) == ["bucket"]


def test_flow_respects_max_urls(monkeypatch, tmp_path):
    listing = "<table><tr><td><a>1.xml</a></td><td><a>2.xml</a></td></tr></table>"
    http = DummyFetcher(
        {BASE: DummyResponse(text=listing), BASE + "1.xml": b"<1/>", BASE + "2.xml": b"<2/>"}
    )
    monkeypatch.setattr(Fetcher, "get", lambda self, url, **kw: http.get(url))
    monkeypatch.setattr(
        Fetcher, "stream_get", lambda self, url, **kw: http.stream_get(url)
    )

    result = feed_ingest_flow(job_payload(tmp_path, max_urls=1))

    assert len(result) == 1
    assert http.calls == [BASE, BASE + "1.xml"]


def test_flow_skips_unreadable_archive_and_continues(monkeypatch, tmp_path):
    listing = "<table><tr><td><a>1.zip</a></td><td><a>2.xml</a></td></tr></table>"
    http = DummyFetcher(
        {
            BASE: DummyResponse(text=listing),
            BASE + "1.zip": mark_encrypted(build_zip([("data.xml", b"<secret/>")])),
            BASE + "2.xml": b"<two/>",
        }
    )
    monkeypatch.setattr(Fetcher, "get", lambda self, url, **kw: http.get(url))
    monkeypatch.setattr(
        Fetcher, "stream_get", lambda self, url, **kw: http.stream_get(url)
    )

    result = feed_ingest_flow(
        job_payload(tmp_path, fetcher={"temp_dir": str(tmp_path)})
    )

    out = tmp_path / "bucket" / "datalake" / "raw" / "test_job" / "data_captura=2026-10-19"
    # the encrypted archive is logged and skipped, the batch goes on
    assert result == [str(out / "2.xml")]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["bucket"]
