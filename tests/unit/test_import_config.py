"""
Unit tests for import configuration.

Tests environment, dictionary and YAML loading.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from testcase_import.core.config import ImportConfig

ENV_VARS = [
    "IMPORT_ENHANCE",
    "IMPORT_INHERIT_TITLES",
    "IMPORT_LOG_LEVEL",
    "IMPORT_LOG_CONSOLE",
    "CSV_AREA_PATH",
    "CSV_ASSIGNED_TO",
    "CSV_DEFAULT_STATE",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestImportConfigDefaults:
    """Test ImportConfig defaults."""

    def test_dataclass_defaults(self):
        config = ImportConfig()

        assert config.enhance is True
        assert config.inherit_titles is False
        assert config.prerequisite_keywords is None
        assert config.log_level == "INFO"
        assert config.default_state == "Design"

    def test_from_env_defaults(self, clean_env):
        assert ImportConfig.from_env() == ImportConfig()


class TestImportConfigFromEnv:
    """Test environment variable loading."""

    def test_reads_variables(self, clean_env):
        clean_env.setenv("IMPORT_ENHANCE", "false")
        clean_env.setenv("IMPORT_INHERIT_TITLES", "yes")
        clean_env.setenv("IMPORT_LOG_LEVEL", "debug")
        clean_env.setenv("IMPORT_LOG_CONSOLE", "0")
        clean_env.setenv("CSV_AREA_PATH", "Project\\Area")
        clean_env.setenv("CSV_ASSIGNED_TO", "qa@example.com")
        clean_env.setenv("CSV_DEFAULT_STATE", "Ready")

        config = ImportConfig.from_env()

        assert config.enhance is False
        assert config.inherit_titles is True
        assert config.log_level == "DEBUG"
        assert config.log_to_console is False
        assert config.area_path == "Project\\Area"
        assert config.assigned_to == "qa@example.com"
        assert config.default_state == "Ready"


class TestImportConfigFromDict:
    """Test dictionary loading."""

    def test_overrides(self, clean_env):
        config = ImportConfig.from_dict({
            'enhance': False,
            'inherit_titles': True,
            'log_level': 'warning',
            'prerequisite_keywords': ['Given', 'Setup'],
        })

        assert config.enhance is False
        assert config.inherit_titles is True
        assert config.log_level == "WARNING"
        assert config.prerequisite_keywords == ['given', 'setup']

    def test_export_section(self, clean_env):
        config = ImportConfig.from_dict({
            'export': {
                'area_path': 'Project\\Area',
                'assigned_to': 'qa@example.com',
                'default_state': 'Ready',
            }
        })

        assert config.area_path == 'Project\\Area'
        assert config.assigned_to == 'qa@example.com'
        assert config.default_state == 'Ready'

    def test_falls_back_to_environment(self, clean_env):
        clean_env.setenv("CSV_AREA_PATH", "FromEnv")
        config = ImportConfig.from_dict({})

        assert config.area_path == "FromEnv"

    def test_invalid_keywords(self, clean_env):
        with pytest.raises(ValueError):
            ImportConfig.from_dict({'prerequisite_keywords': 'setup'})


class TestImportConfigFromYaml:
    """Test YAML profile loading."""

    def test_load(self, clean_env, tmp_path):
        profile = tmp_path / "import.yaml"
        profile.write_text(
            "enhance: false\n"
            "prerequisite_keywords:\n"
            "  - precondition\n"
            "  - Given\n"
            "export:\n"
            "  area_path: Shop\\Checkout\n",
            encoding='utf-8'
        )

        config = ImportConfig.load_from_yaml(str(profile))

        assert config.enhance is False
        assert config.prerequisite_keywords == ['precondition', 'given']
        assert config.area_path == 'Shop\\Checkout'

    def test_empty_file(self, clean_env, tmp_path):
        profile = tmp_path / "empty.yaml"
        profile.write_text("", encoding='utf-8')

        assert ImportConfig.load_from_yaml(str(profile)) == ImportConfig()

    def test_non_mapping(self, clean_env, tmp_path):
        profile = tmp_path / "list.yaml"
        profile.write_text("- a\n- b\n", encoding='utf-8')

        with pytest.raises(ValueError):
            ImportConfig.load_from_yaml(str(profile))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImportConfig.load_from_yaml(str(tmp_path / "missing.yaml"))
