"""
Tests for the ConfigManager class.
"""

from unittest.mock import Mock, patch

from PySide6.QtCore import QCoreApplication

from uihelper.core.config import DEFAULT_CONFIG
from uihelper.core.config_manager import ConfigManager


class TestConfigManager:
    """Test cases for ConfigManager with a mocked QSettings."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.settings_patcher = patch("uihelper.core.config_manager.QSettings")
        self.mock_qsettings_class = self.settings_patcher.start()
        self.mock_qsettings = Mock()
        self.mock_qsettings_class.return_value = self.mock_qsettings

    def teardown_method(self) -> None:
        """Clean up test fixtures."""
        self.settings_patcher.stop()

    def test_init(self) -> None:
        """Test ConfigManager initialization."""
        ConfigManager()

        self.mock_qsettings_class.assert_called_once_with("uihelper", "UIHelper")

    def test_get_with_default(self) -> None:
        """Test getting a value with default fallback."""
        config_manager = ConfigManager()
        self.mock_qsettings.value.return_value = "Tips"

        result = config_manager.get("tips_title")

        assert result == "Tips"
        self.mock_qsettings.value.assert_called_with("uihelper/tips_title", "Tips")

    def test_get_with_stored_value(self) -> None:
        """Test getting a stored value."""
        config_manager = ConfigManager()
        self.mock_qsettings.value.return_value = "Hint"

        assert config_manager.get("tips_title") == "Hint"

    def test_get_boolean_coercion(self) -> None:
        """Test boolean type coercion from QSettings."""
        config_manager = ConfigManager()

        self.mock_qsettings.value.return_value = "true"
        assert config_manager.get("use_native_dialogs") is True

        self.mock_qsettings.value.return_value = "false"
        assert config_manager.get("use_native_dialogs") is False

        self.mock_qsettings.value.return_value = 0
        assert config_manager.get("use_native_dialogs") is False

    def test_get_invalid_log_level_falls_back(self) -> None:
        """Test that an unknown log level is replaced by the default."""
        config_manager = ConfigManager()
        self.mock_qsettings.value.return_value = "CHATTY"

        assert config_manager.get("log_level") == "INFO"

    def test_set(self) -> None:
        """Test setting a value."""
        config_manager = ConfigManager()

        config_manager.set("tips_title", "Hint")

        self.mock_qsettings.setValue.assert_called_with("uihelper/tips_title", "Hint")
        self.mock_qsettings.sync.assert_called_once()

    def test_set_unknown_key_is_skipped(self) -> None:
        """Test that unknown keys are not stored."""
        config_manager = ConfigManager()

        config_manager.set("row_color", "#ffffff")

        self.mock_qsettings.setValue.assert_not_called()

    def test_load_all(self) -> None:
        """Test loading all configuration values."""
        config_manager = ConfigManager()

        def mock_value(key, default):
            stored_values = {"uihelper/tips_title": "Hint", "uihelper/use_native_dialogs": "false"}
            return stored_values.get(key, default)

        self.mock_qsettings.value.side_effect = mock_value

        result = config_manager.load_all()

        assert result["tips_title"] == "Hint"
        assert result["use_native_dialogs"] is False
        assert result["log_level"] == DEFAULT_CONFIG["log_level"]
        assert set(result) == set(DEFAULT_CONFIG)

    def test_reset_to_defaults(self) -> None:
        """Test that reset removes only the uihelper group."""
        config_manager = ConfigManager()

        config_manager.reset_to_defaults()

        self.mock_qsettings.remove.assert_called_once_with("uihelper")
        self.mock_qsettings.clear.assert_not_called()
        self.mock_qsettings.sync.assert_called_once()

    def test_has_key(self) -> None:
        """Test checking if a key exists."""
        config_manager = ConfigManager()
        self.mock_qsettings.contains.return_value = True

        assert config_manager.has_key("tips_title") is True
        self.mock_qsettings.contains.assert_called_with("uihelper/tips_title")

    def test_type_coercion_error_handling(self) -> None:
        """Test handling of type coercion errors."""
        config_manager = ConfigManager()

        self.mock_qsettings.value.return_value = object()

        # str(object()) is not a supported level, so the default wins
        assert config_manager.get("log_level") == "INFO"


class TestConfigManagerPersistence:
    """Test ConfigManager against a real QSettings in a temporary location."""

    def test_round_trip(self, qapp) -> None:
        ConfigManager().set("tips_title", "Hint")

        assert ConfigManager().get("tips_title") == "Hint"
        assert ConfigManager().has_key("tips_title")

    def test_reset(self, qapp) -> None:
        manager = ConfigManager()
        manager.set("use_native_dialogs", False)

        manager.reset_to_defaults()

        assert manager.get("use_native_dialogs") is True
        assert not manager.has_key("use_native_dialogs")

    def test_application_names_untouched(self, qapp) -> None:
        organization = QCoreApplication.organizationName()
        application = QCoreApplication.applicationName()
        QCoreApplication.setOrganizationName("")
        QCoreApplication.setApplicationName("")
        try:
            ConfigManager().set("tips_title", "Hint")

            assert QCoreApplication.organizationName() == ""
            assert QCoreApplication.applicationName() == ""
        finally:
            QCoreApplication.setOrganizationName(organization)
            QCoreApplication.setApplicationName(application)
