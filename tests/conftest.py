"""Pytest configuration and fixtures."""

import pytest

from amm_pool.assets.memory import InMemoryAssetLink
from amm_pool.pool.pool import Pool
from tests.helpers import USER1, USER2, fund, make_pool


@pytest.fixture
def pool_and_link() -> tuple[Pool, InMemoryAssetLink]:
    """An empty pool with USER1 and USER2 funded and approved."""
    pool, link = make_pool()
    fund(link, USER1)
    fund(link, USER2)
    return pool, link


@pytest.fixture
def pool(pool_and_link: tuple[Pool, InMemoryAssetLink]) -> Pool:
    return pool_and_link[0]


@pytest.fixture
def link(pool_and_link: tuple[Pool, InMemoryAssetLink]) -> InMemoryAssetLink:
    return pool_and_link[1]


@pytest.fixture
def seeded_pool(pool: Pool) -> Pool:
    """The funded pool after USER1 deposited 1000 of each asset."""
    pool.add_liquidity(USER1, 1000, 1000)
    return pool
