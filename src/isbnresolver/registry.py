# ABOUTME: Validation of caller-supplied provider orders.
# ABOUTME: Rejects unknown providers and collapses duplicates while keeping first-seen order.

from collections.abc import Sequence

from isbnresolver.errors import ValidationError
from isbnresolver.provider import ProviderName


def _coerce(provider: object) -> ProviderName:
    if isinstance(provider, ProviderName):
        return provider
    try:
        return ProviderName(provider)
    except ValueError:
        raise ValidationError("Please pass in supported providers.") from None


def select_providers(providers: Sequence[ProviderName | str]) -> tuple[ProviderName, ...]:
    """Validate a provider order and remove duplicates.

    Accepts ProviderName members or their string values. An empty list
    yields an empty tuple; callers decide what that means.

    Raises:
        ValidationError: If providers is not a list or tuple, or names an
            unknown provider.
    """
    if not isinstance(providers, list | tuple):
        raise ValidationError("`providers` must be a list.")

    return tuple(dict.fromkeys(_coerce(p) for p in providers))
