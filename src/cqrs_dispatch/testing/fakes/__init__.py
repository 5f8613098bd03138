"""Testing fakes – in-memory doubles for the resolver port."""
from cqrs_dispatch.testing.fakes.resolver import RecordingResolver

__all__ = ["RecordingResolver"]
