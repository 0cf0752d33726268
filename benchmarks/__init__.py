"""Performance benchmarks for lnsearch.

This package times each line-search method on the registered benchmark
objectives and reports oracle evaluation counts.
"""
