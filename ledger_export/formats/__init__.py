"""Batch formats, one module per accounting destination."""
