def test_imports():
    import importlib
    import sys
    import os

    # Ensure `src/` is on sys.path so `feed_ingest` imports during tests (src layout)
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    src_path = os.path.join(project_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)

    # requests / bs4
    import bs4
    import requests

    assert getattr(requests, "__version__", None)
    assert getattr(bs4, "__version__", None)

    # feed_ingest package
    pkg = importlib.import_module("feed_ingest.core.scraping")
    assert pkg.ResourceFetcher is not None
    flow_mod = importlib.import_module("feed_ingest.flows.feed_flow")
    assert flow_mod.feed_ingest_flow is not None
