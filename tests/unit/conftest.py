"""
Pytest configuration for unit tests.

Provides sample OFX documents and resets configuration singletons so that
environment overrides in one test cannot leak into another.
"""

import pytest
from pathlib import Path


FIXTURES_DIR = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture(autouse=True, scope="function")
def reset_config_singletons(monkeypatch):
    """Start every test with freshly loaded settings and code tables."""
    import ofx_parser.config as config

    monkeypatch.setattr(config, '_settings', None)
    monkeypatch.setattr(config, '_code_tables', None)
    yield


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding='utf-8')


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def bank_ofx() -> str:
    """OFX 1.02 bank statement with CRLF header and three transactions."""
    return _read_fixture('bank.ofx')


@pytest.fixture
def credit_card_ofx() -> str:
    return _read_fixture('credit_card.ofx')


@pytest.fixture
def investment_ofx() -> str:
    """Brokerage statement: trades, positions, balances and a security list."""
    return _read_fixture('investment.ofx')


@pytest.fixture
def signup_ofx() -> str:
    return _read_fixture('signup.ofx')


@pytest.fixture
def ofx2_ofx() -> str:
    """OFX 2.11 XML document with a processing-instruction header."""
    return _read_fixture('ofx2.ofx')
