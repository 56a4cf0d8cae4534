"""Tests for the module message widget."""

import pytest

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from dashboard.gui.layout_pane import LayoutPane, LocalizedPane
from dashboard.gui.module_configuration import ModuleConfiguration
from dashboard.gui.module_message import ModuleMessage
from dashboard.gui.module_message_type import ModuleMessageType
from dashboard.gui.module_widget import ModuleWidget
from dashboard.language.language_code import LanguageCode
from dashboard.localization.localization_error import ResolutionExhaustedError


@pytest.fixture
def host(qapp):
    """Provide an unshown widget to host messages."""
    return QWidget()


@pytest.fixture
def no_lookup(monkeypatch):
    """Fail the test if the message tries to resolve its key."""
    calls = []

    def fake_get_localized_text(key, control, lookup=None):
        calls.append(key)
        raise AssertionError("resolution should not happen")

    monkeypatch.setattr("dashboard.gui.module_message.get_localized_text", fake_get_localized_text)
    return calls


class TestMessageType:
    """Test message types and style hints."""

    def test_default_type_is_success(self, host):
        """Test the default message type."""
        message = ModuleMessage(host)
        assert message.message_type() is ModuleMessageType.SUCCESS
        assert message.message_style() == "Success"

    @pytest.mark.parametrize("message_type,style", [
        (ModuleMessageType.NONE, "None"),
        (ModuleMessageType.ERROR, "Error"),
        (ModuleMessageType.WARNING, "Warning"),
        (ModuleMessageType.SUCCESS, "Success"),
        (ModuleMessageType.INFORMATION, "Information"),
    ])
    def test_message_style(self, host, message_type, style):
        """Test the style hint for every message type."""
        message = ModuleMessage(host, message_type)
        assert message.message_style() == style
        assert message.property("messageStyle") == style

    def test_css_class(self, host):
        """Test the CSS class hint."""
        message = ModuleMessage(host)
        assert message.css_class() == ""

        message.set_css_class("banner")
        assert message.css_class() == "banner"
        assert message.property("cssClass") == "banner"


class TestVisibility:
    """Test the permanent visibility suppression for NONE messages."""

    def test_visible_for_normal_types(self, host):
        """Test that other message types follow visibility requests."""
        message = ModuleMessage(host, ModuleMessageType.WARNING)

        message.setVisible(False)
        assert message.isHidden()

        message.setVisible(True)
        assert not message.isHidden()

    def test_none_hides_message(self, host):
        """Test that setting NONE hides the message."""
        message = ModuleMessage(host)
        message.set_message_type(ModuleMessageType.NONE)

        assert message.isHidden()
        assert message.is_suppressed()

    def test_none_rejects_show(self, host):
        """Test that a NONE message cannot be shown again."""
        message = ModuleMessage(host, ModuleMessageType.NONE)

        message.setVisible(True)
        assert message.isHidden()

        message.show()
        assert message.isHidden()

    def test_suppression_survives_type_change(self, host):
        """Test that changing the type away from NONE does not lift suppression."""
        message = ModuleMessage(host)
        message.set_message_type(ModuleMessageType.NONE)
        message.set_message_type(ModuleMessageType.ERROR)

        message.setVisible(True)

        assert message.isHidden()
        assert message.message_style() == "Error"

    def test_none_stays_hidden_when_host_shown(self, host):
        """Test that showing the host does not show a NONE message."""
        message = ModuleMessage(host, ModuleMessageType.NONE)
        sibling = ModuleMessage(host, ModuleMessageType.SUCCESS)

        host.show()

        assert not message.isVisible()
        assert sibling.isVisible()
        host.hide()


class TestText:
    """Test explicit text and text resolved from resource keys."""

    def test_load_resolves_key_from_module(self, resource_root, write_catalog):
        """Test that load fills in text from the module's resource file."""
        write_catalog(resource_root / "Module.json", {"Saved": "Saved!"})
        module = ModuleWidget("~/Module.json")
        message = ModuleMessage(LayoutPane(module), resource_key="Saved")

        message.load()

        assert message.text() == "Saved!"

    def test_load_uses_nearest_pane(self, resource_root, write_catalog):
        """Test that a localized pane between message and module is preferred."""
        write_catalog(resource_root / "Module.json", {"Notice": "From module"})
        write_catalog(resource_root / "Pane.json", {"Notice": "From pane"})
        module = ModuleWidget("~/Module.json")
        pane = LocalizedPane("~/Pane.json", module)
        message = ModuleMessage(pane, resource_key="Notice")

        message.load()

        assert message.text() == "From pane"

    def test_explicit_text_not_overwritten(self, host, no_lookup):
        """Test that explicit text wins over the resource key."""
        message = ModuleMessage(host, resource_key="Saved")
        message.set_text("Typed by hand")

        message.load()

        assert message.text() == "Typed by hand"
        assert no_lookup == []

    def test_type_change_keeps_explicit_text(self, host, no_lookup):
        """Test that changing the type after setting text keeps the text."""
        message = ModuleMessage(host, resource_key="Saved")
        message.set_text("Typed by hand")
        message.set_message_type(ModuleMessageType.ERROR)

        message.load()

        assert message.text() == "Typed by hand"

    def test_empty_key_does_not_look_up(self, host, no_lookup):
        """Test that no lookup happens without a resource key."""
        message = ModuleMessage(host)
        message.set_text("Plain")

        message.load()

        assert message.text() == "Plain"
        assert no_lookup == []

    def test_empty_key_without_text(self, qapp, no_lookup):
        """Test that a message with neither key nor text loads without resolving."""
        message = ModuleMessage()

        message.load()

        assert message.text() == ""

    def test_unresolvable_key_raises(self, host):
        """Test that load reports a key with no resource file above it."""
        message = ModuleMessage(LayoutPane(host), resource_key="Saved")

        with pytest.raises(ResolutionExhaustedError):
            message.load()

    def test_set_resource_key(self, resource_root, write_catalog):
        """Test setting the key after construction."""
        write_catalog(resource_root / "Module.json", {"Later": "Set later"})
        module = ModuleWidget("~/Module.json")
        message = ModuleMessage(module)
        message.set_resource_key("Later")

        message.load()

        assert message.resource_key() == "Later"
        assert message.text() == "Set later"


class TestModuleContext:
    """Test picking up the hosting module's configuration."""

    def test_configuration_copied_on_load(self, qapp):
        """Test that the module configuration is available after load."""
        configuration = ModuleConfiguration(module_id=42, title="Status")
        module = ModuleWidget("~/Module.json", configuration)
        message = ModuleMessage(LayoutPane(module))

        assert message.module_configuration() is None

        message.load()

        assert message.module_configuration() is configuration


class TestLanguageChange:
    """Test relocalization when the language changes."""

    def test_resolved_text_follows_language(self, resource_root, write_catalog, language_manager):
        """Test that text from a key is resolved again in the new language."""
        write_catalog(resource_root / "Module.json", {"Saved": "Saved"})
        write_catalog(resource_root / "Module.fr.json", {"Saved": "Enregistré"})
        module = ModuleWidget("~/Module.json")
        message = ModuleMessage(module, resource_key="Saved")
        message.load()

        language_manager.set_language(LanguageCode.FR)

        assert message.text() == "Enregistré"

    def test_explicit_text_ignores_language(self, resource_root, write_catalog, language_manager):
        """Test that explicit text is kept when the language changes."""
        write_catalog(resource_root / "Module.fr.json", {"Saved": "Enregistré"})
        module = ModuleWidget("~/Module.json")
        message = ModuleMessage(module, resource_key="Saved")
        message.set_text("Typed by hand")
        message.load()

        language_manager.set_language(LanguageCode.FR)

        assert message.text() == "Typed by hand"

    def test_layout_direction_follows_language(self, host, language_manager):
        """Test that right to left languages flip the message layout."""
        message = ModuleMessage(host)
        language_manager.set_language(LanguageCode.AR)

        assert message.layoutDirection() == Qt.LayoutDirection.RightToLeft

    def test_message_created_in_right_to_left_language(self, host, language_manager):
        """Test that a message built while Arabic is active starts right to left."""
        language_manager.set_language(LanguageCode.AR)

        message = ModuleMessage(host)

        assert message.layoutDirection() == Qt.LayoutDirection.RightToLeft
