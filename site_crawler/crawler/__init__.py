# site_crawler/crawler/__init__.py
"""Same-origin crawl engine: normalizer, fetcher, frontier and orchestrator."""
