"""Unit tests for the chat_markup exception hierarchy."""

import pytest

from chat_markup.errors import (
    ChatMarkupError,
    PlaceholderProviderError,
    ProviderConfigError,
    ProviderOperationContext,
    ProviderRegistrationError,
)


@pytest.mark.unit
def test_provider_error_message_with_details():
    cause = TimeoutError("slow")
    err = PlaceholderProviderError(
        context=ProviderOperationContext(
            provider="PlaceholderAPI", operation="set_placeholders", details="timed out"
        ),
        cause=cause,
    )
    assert str(err) == "PlaceholderAPI.set_placeholders: timed out"
    assert err.cause is cause
    assert err.context.operation == "set_placeholders"


@pytest.mark.unit
def test_provider_error_message_without_details():
    err = PlaceholderProviderError(
        context=ProviderOperationContext(provider="p", operation="set_bracket_placeholders")
    )
    assert str(err) == "p.set_bracket_placeholders"
    assert err.cause is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_type", [PlaceholderProviderError, ProviderConfigError, ProviderRegistrationError]
)
def test_all_errors_share_base(exc_type):
    assert issubclass(exc_type, ChatMarkupError)


@pytest.mark.unit
def test_config_error_is_value_error():
    assert issubclass(ProviderConfigError, ValueError)
