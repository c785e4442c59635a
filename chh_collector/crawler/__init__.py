"""Crawl loop, URL frontier, link filter and fetcher."""
