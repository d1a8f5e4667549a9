"""Crawl core: frontier, fetcher, link discovery and the crawl loop."""
