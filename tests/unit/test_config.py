"""
Unit tests for configuration management using Pydantic Settings.

Covers ParserSettings (environment driven) and CodeTablesConfig (loaded
from ofx_parser/data/codes.yaml).
"""

import pytest


class TestParserSettings:

    def test_defaults(self):
        from ofx_parser.config import ParserSettings

        settings = ParserSettings()

        assert settings.recover is True
        assert settings.huge_tree is True
        assert settings.input_encodings == ['utf-8', 'cp1252']
        assert settings.codes_path is None

    def test_environment_overrides(self, monkeypatch):
        from ofx_parser.config import ParserSettings

        monkeypatch.setenv('OFX_PARSER_RECOVER', 'false')
        monkeypatch.setenv('OFX_PARSER_INPUT_ENCODINGS', '["latin-1"]')

        settings = ParserSettings()

        assert settings.recover is False
        assert settings.input_encodings == ['latin-1']

    def test_get_settings_is_singleton(self):
        from ofx_parser.config import get_settings

        assert get_settings() is get_settings()


class TestCodeTablesConfig:

    def test_loads_yaml_automatically(self):
        from ofx_parser.config import CodeTablesConfig

        tables = CodeTablesConfig()

        assert tables.transaction_types['DEBIT'] == 'Generic debit'
        assert tables.account_types['CHECKING'] == 'Checking'
        assert tables.severities['INFO'] == 'Informational only'

    def test_numeric_keys_are_strings(self):
        """YAML reads status codes and SIC codes as ints; keys are normalized to str."""
        from ofx_parser.config import CodeTablesConfig

        tables = CodeTablesConfig()

        assert tables.status_codes['0'] == 'Success'
        assert '5411' in tables.merchant_categories
        assert all(isinstance(k, str) for k in tables.merchant_categories)

    def test_explicit_data_is_not_overridden(self):
        from ofx_parser.config import CodeTablesConfig

        tables = CodeTablesConfig(transaction_types={'X': 'Custom'})

        assert tables.transaction_types == {'X': 'Custom'}
        assert tables.status_codes == {}

    def test_describe(self):
        from ofx_parser.config import CodeTablesConfig

        tables = CodeTablesConfig()

        assert tables.describe('transaction_types', ' xfer ') == 'Transfer'
        assert tables.describe('transaction_types', None) is None
        assert tables.describe('transaction_types', 'NOPE') is None

    def test_codes_path_override(self, tmp_path, monkeypatch):
        from ofx_parser.config import CodeTablesConfig

        codes = tmp_path / 'codes.yaml'
        codes.write_text("transaction_types:\n  DEBIT: Money out\n", encoding='utf-8')
        monkeypatch.setenv('OFX_PARSER_CODES_PATH', str(codes))

        tables = CodeTablesConfig()

        assert tables.transaction_types == {'DEBIT': 'Money out'}
        assert tables.merchant_categories == {}

    def test_packaged_tables_load_from_any_cwd(self, tmp_path, monkeypatch):
        """Code tables ship inside the package, not relative to the working directory."""
        from ofx_parser.config import get_code_tables
        from ofx_parser.models import Transaction

        monkeypatch.chdir(tmp_path)

        assert get_code_tables().transaction_types['DEBIT'] == 'Generic debit'
        assert Transaction(type='DEBIT').type_description == 'Generic debit'

    def test_missing_file_raises(self, tmp_path, monkeypatch):
        from ofx_parser.config import CodeTablesConfig

        monkeypatch.setenv('OFX_PARSER_CODES_PATH', str(tmp_path / 'missing.yaml'))

        with pytest.raises(FileNotFoundError):
            CodeTablesConfig()
