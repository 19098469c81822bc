"""Tests for pool configuration."""

import pytest

from amm_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from amm_pool.constants import DEFAULT_ASSET_A, DEFAULT_ASSET_B, DEFAULT_POOL_ADDRESS
from amm_pool.errors import InvalidArgument
from tests.helpers import DAI, USDC, USDT, make_config


class TestPoolConfig:
    """Validation of pool parameters."""

    def test_defaults(self):
        """The default config is the USDc/USDt pool with no fee."""
        assert DEFAULT_POOL_CONFIG.name == "USDc / USDt"
        assert DEFAULT_POOL_CONFIG.symbol == "USDc/USDt"
        assert DEFAULT_POOL_CONFIG.asset_a == DEFAULT_ASSET_A.lower()
        assert DEFAULT_POOL_CONFIG.fee_bps == 0

    def test_identifiers_are_normalized(self):
        """Asset identifiers are stripped and lowercased."""
        config = make_config(asset_a=" " + USDC.upper().replace("0X", "0x"))
        assert config.asset_a == USDC

    def test_is_frozen(self):
        """Configs cannot be modified after creation."""
        config = make_config()
        with pytest.raises(AttributeError):
            config.fee_bps = 10  # type: ignore[misc]

    def test_same_assets_rejected(self):
        """A pool needs two distinct assets."""
        with pytest.raises(InvalidArgument):
            make_config(asset_b=USDC.upper())

    def test_pool_address_must_differ_from_assets(self):
        """The pool address cannot be one of its assets."""
        with pytest.raises(InvalidArgument):
            make_config(address=USDT)

    @pytest.mark.parametrize("field", ["name", "symbol"])
    def test_empty_metadata_rejected(self, field):
        """Name and symbol must be non-empty."""
        with pytest.raises(InvalidArgument):
            make_config(**{field: ""})

    @pytest.mark.parametrize("fee_bps", [-1, 10_000, 12_345, True, 0.3, "30"])
    def test_invalid_fee_rejected(self, fee_bps):
        """fee_bps must be an integer in [0, 10000)."""
        with pytest.raises(InvalidArgument):
            make_config(fee_bps=fee_bps)

    def test_empty_identifier_rejected(self):
        """Blank identifiers are rejected."""
        with pytest.raises(InvalidArgument):
            make_config(asset_a="   ")


POOL_ENV_VARS = (
    "POOL_NAME",
    "POOL_SYMBOL",
    "POOL_ASSET_A",
    "POOL_ASSET_B",
    "POOL_ADDRESS",
    "POOL_FEE_BPS",
)


class TestFromEnv:
    """Configuration from POOL_* environment variables."""

    def test_defaults_without_env(self, monkeypatch):
        """With no POOL_* variables the default config is used."""
        for var in POOL_ENV_VARS:
            monkeypatch.delenv(var, raising=False)
        config = PoolConfig.from_env()
        assert config == DEFAULT_POOL_CONFIG
        assert config.asset_b == DEFAULT_ASSET_B.lower()
        assert config.address == DEFAULT_POOL_ADDRESS

    def test_reads_env(self, monkeypatch):
        """POOL_* variables override every default."""
        monkeypatch.setenv("POOL_NAME", "USDc / DAI")
        monkeypatch.setenv("POOL_SYMBOL", "USDc/DAI")
        monkeypatch.setenv("POOL_ASSET_A", USDC)
        monkeypatch.setenv("POOL_ASSET_B", DAI)
        monkeypatch.setenv("POOL_FEE_BPS", "30")
        config = PoolConfig.from_env()
        assert (config.name, config.symbol) == ("USDc / DAI", "USDc/DAI")
        assert (config.asset_a, config.asset_b) == (USDC, DAI)
        assert config.fee_bps == 30

    def test_bad_fee_env_rejected(self, monkeypatch):
        """A non-integer POOL_FEE_BPS is rejected."""
        monkeypatch.setenv("POOL_FEE_BPS", "thirty")
        with pytest.raises(InvalidArgument):
            PoolConfig.from_env()
