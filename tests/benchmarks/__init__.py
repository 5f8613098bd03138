"""Dispatch latency benchmarks for CommandBus and binding lookup.

``pytest tests/benchmarks --benchmark-disable`` runs them as plain tests.
"""
