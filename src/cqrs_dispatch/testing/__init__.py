"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["cqrs_dispatch.testing.fixtures"]
"""

from cqrs_dispatch.testing.fakes import RecordingResolver

__all__ = ["RecordingResolver"]
