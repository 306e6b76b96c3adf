"""Benchmark orchestration package.

Provides plan generation, the run loop, result sinks and aggregation of
persisted results.
"""
