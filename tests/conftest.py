import pytest


class StubConfig:
    """Stands in for pulumi.Config; returns None for unset keys."""

    def __init__(self, values: dict[str, str] | None = None):
        self.values = values or {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)


@pytest.fixture
def stub_config():
    return StubConfig
