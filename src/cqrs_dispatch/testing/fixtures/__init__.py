"""Testing fixtures – pytest fixtures for fake doubles."""
from cqrs_dispatch.testing.fixtures.resolver import import_path_resolver, recording_resolver

__all__ = ["import_path_resolver", "recording_resolver"]
