"""
Tests for the trigger registry.
"""

import pytest

from slackhook.core import NotificationProfile
from slackhook.errors import SlackNotificationError, UnknownTrigger
from slackhook.triggers import TRIGGER_PROFILES, list_triggers, lookup


class TestLookup:
    """Tests for lookup function."""

    @pytest.mark.parametrize("trigger,template,color", [
        ("start", "slack-template-started.j2", "warning"),
        ("success", "slack-template-success.j2", "good"),
        ("failure", "slack-template-error.j2", "danger"),
    ])
    def test_registered_triggers(self, trigger: str, template: str, color: str) -> None:
        """Test each trigger maps to its fixed template and color."""
        assert lookup(trigger) == NotificationProfile(template=template, color=color)

    @pytest.mark.parametrize("trigger", ["bogus", "", "Success", "avgduration"])
    def test_unknown_trigger(self, trigger: str) -> None:
        """Test that unregistered triggers raise UnknownTrigger."""
        with pytest.raises(UnknownTrigger, match="Unknown trigger type"):
            lookup(trigger)

    def test_unknown_trigger_is_value_error(self) -> None:
        """Test UnknownTrigger is both a ValueError and a Slackhook error."""
        with pytest.raises(ValueError):
            lookup("bogus")
        with pytest.raises(SlackNotificationError):
            lookup("bogus")

    def test_unhashable_trigger(self) -> None:
        """Test that a non-string trigger is rejected the same way."""
        with pytest.raises(UnknownTrigger):
            lookup(["start"])  # type: ignore[arg-type]


class TestTriggerTable:
    """Tests for the shared trigger table."""

    def test_exactly_three_triggers(self) -> None:
        """Test the table holds start, success and failure only."""
        assert sorted(list_triggers()) == ["failure", "start", "success"]

    def test_table_is_read_only(self) -> None:
        """Test the table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            TRIGGER_PROFILES["custom"] = NotificationProfile("x.j2", "good")  # type: ignore[index]

    def test_profiles_are_frozen(self) -> None:
        """Test profiles cannot be modified."""
        profile = lookup("success")
        with pytest.raises(AttributeError):
            profile.color = "danger"  # type: ignore[misc]
