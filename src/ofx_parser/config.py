"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- Parser runtime settings (lxml recover mode, byte input encodings)
- OFX code tables loaded from the packaged data/codes.yaml (transaction types,
  account types, status codes, merchant category codes)
"""

from pathlib import Path
from typing import Dict, List, Optional
import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """
    Runtime settings for the parsing pipeline.

    Environment Variables (from .env):
        OFX_PARSER_RECOVER: Let lxml recover from markup errors (default: true)
        OFX_PARSER_HUGE_TREE: Lift lxml's tree size limits (default: true)
        OFX_PARSER_INPUT_ENCODINGS: JSON list of encodings tried for bytes input
        OFX_PARSER_CODES_PATH: Override path to the code-table YAML

    Example:
        >>> settings = get_settings()
        >>> settings.input_encodings
        ['utf-8', 'cp1252']
    """

    recover: bool = Field(
        default=True,
        description="Build the tree in lxml recover mode (bare '&' and similar)"
    )

    huge_tree: bool = Field(
        default=True,
        description="Disable lxml security limits on very large statements"
    )

    input_encodings: List[str] = Field(
        default_factory=lambda: ['utf-8', 'cp1252'],
        description="Encodings tried in order when the input is bytes"
    )

    codes_path: Optional[str] = Field(
        default=None,
        description="Path to the code-table YAML (defaults to the packaged data/codes.yaml)"
    )

    model_config = SettingsConfigDict(
        env_prefix='OFX_PARSER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


# Singleton pattern - loaded once, cached forever
_settings: Optional[ParserSettings] = None


def get_settings() -> ParserSettings:
    """
    Get global parser settings instance (lazy-loaded singleton).

    Returns:
        Singleton ParserSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ParserSettings()
    return _settings


def _resolve_codes_path() -> Path:
    """Locate the code-table YAML (explicit setting, then the packaged copy)."""
    explicit = get_settings().codes_path
    if explicit:
        return Path(explicit)

    # Shipped as package data next to this module
    return Path(__file__).parent / 'data' / 'codes.yaml'


class CodeTablesConfig(BaseSettings):
    """
    OFX code tables automatically loaded from the packaged data/codes.yaml.

    Attributes:
        transaction_types: TRNTYPE code -> description
        account_types: ACCTTYPE code -> description
        status_codes: STATUS/CODE value -> meaning
        severities: STATUS/SEVERITY value -> meaning
        merchant_categories: SIC (merchant category code) -> description

    Example:
        >>> tables = CodeTablesConfig()
        >>> tables.transaction_types['DEBIT']
        'Generic debit'
    """

    transaction_types: Dict[str, str] = Field(
        default_factory=dict,
        description="Transaction type codes (TRNTYPE)"
    )
    account_types: Dict[str, str] = Field(
        default_factory=dict,
        description="Bank account type codes (ACCTTYPE)"
    )
    status_codes: Dict[str, str] = Field(
        default_factory=dict,
        description="Status codes returned in STATUS aggregates"
    )
    severities: Dict[str, str] = Field(
        default_factory=dict,
        description="Status severities"
    )
    merchant_categories: Dict[str, str] = Field(
        default_factory=dict,
        description="Merchant category codes (SIC) with descriptions"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load code tables from the YAML file if not already provided.

        This validator runs before field validation and loads the YAML file
        if the data dict is empty (i.e., no values were provided).
        """
        # If data already has values (e.g., from tests), don't override
        if data:
            return data

        config_path = _resolve_codes_path()

        if not config_path.exists():
            raise FileNotFoundError(
                f"Code table file not found at {config_path}. "
                f"Reinstall the package (data/codes.yaml is package data) "
                f"or set OFX_PARSER_CODES_PATH."
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        # YAML reads numeric keys (status codes, SIC) as ints
        return {
            name: {str(k): str(v) for k, v in (yaml_data.get(name) or {}).items()}
            for name in (
                'transaction_types',
                'account_types',
                'status_codes',
                'severities',
                'merchant_categories',
            )
        }

    def describe(self, table: str, code: Optional[str]) -> Optional[str]:
        """
        Look up a code in one of the tables.

        Args:
            table: Table attribute name (e.g., 'transaction_types')
            code: Code to look up; None yields None

        Returns:
            Description, or None if the code is unknown
        """
        if code is None:
            return None
        return getattr(self, table).get(code.strip().upper())


_code_tables: Optional[CodeTablesConfig] = None


def get_code_tables() -> CodeTablesConfig:
    """
    Get global code tables instance (lazy-loaded singleton).

    Returns:
        Singleton CodeTablesConfig instance
    """
    global _code_tables
    if _code_tables is None:
        _code_tables = CodeTablesConfig()
    return _code_tables
