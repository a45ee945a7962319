"""Crawl pipeline stages: link collection, fetching, sanitizing, conversion."""
