"""Analyze MySQL EXPLAIN FORMAT=JSON output and report on how tables are accessed."""

__version__ = "0.1.0"