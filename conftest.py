pytest_plugins = ["cqrs_dispatch.testing.fixtures"]
