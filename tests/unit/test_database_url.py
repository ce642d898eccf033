"""Unit tests for database URL normalisation."""

import pytest

from command_center.infrastructure.database.connection import to_async_url


class TestToAsyncUrl:

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgres://u:p@db:5432/lifecc", "postgresql+asyncpg://u:p@db:5432/lifecc"),
            ("postgresql://u:p@db:5432/lifecc", "postgresql+asyncpg://u:p@db:5432/lifecc"),
            ("sqlite:///./lifecc.db", "sqlite+aiosqlite:///./lifecc.db"),
        ],
    )
    def test_plain_urls_get_async_driver(self, url, expected):
        assert to_async_url(url) == expected

    def test_async_urls_are_left_alone(self):
        url = "postgresql+asyncpg://u:p@db:5432/lifecc"

        assert to_async_url(url) == url
