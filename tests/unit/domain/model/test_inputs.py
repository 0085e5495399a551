"""Tests for domain/model/inputs.py."""

import pytest

from pactreport.domain.model.inputs import ConsumerInfo, Interaction, ProviderInfo, ProviderState


class TestInputs:
    """Tests for verifier inputs."""

    def test_empty_provider_name(self) -> None:
        """FAIL-FIRST: provider name required."""
        with pytest.raises(ValueError, match="provider"):
            ProviderInfo("")

    def test_empty_consumer_name(self) -> None:
        """FAIL-FIRST: consumer name required."""
        with pytest.raises(ValueError, match="consumer"):
            ConsumerInfo("")

    def test_consumer_not_pending_by_default(self) -> None:
        """pending defaults to False."""
        assert ConsumerInfo("A").pending is False


class TestInteractionToMap:
    """Tests for Interaction.to_map()."""

    def test_description_only(self) -> None:
        """Minimal snapshot."""
        assert Interaction("a request").to_map() == {"description": "a request"}

    def test_states_with_params(self) -> None:
        """Provider states rendered with params when present."""
        interaction = Interaction(
            "a request",
            provider_states=(ProviderState("user exists", {"id": 1}), ProviderState("logged in")),
        )
        assert interaction.to_map()["providerStates"] == [
            {"name": "user exists", "params": {"id": 1}},
            {"name": "logged in"},
        ]

    def test_contents_follow_description(self) -> None:
        """Contents appended after description and states."""
        interaction = Interaction("a request", contents={"request": {"method": "GET"}})
        assert list(interaction.to_map()) == ["description", "request"]
