from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import AfterValidator

IDENTIFIER_REGEX = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")
IDENTIFIER_MAX_LENGTH = 63

DEFAULT_PROVIDER_NAME = "_default"


def is_identifier(value: Any) -> bool:
    return (
        isinstance(value, str)
        and len(value) <= IDENTIFIER_MAX_LENGTH
        and IDENTIFIER_REGEX.match(value) is not None
    )


def _check_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValueError(
            f"'{value}' is not a valid identifier: use lowercase letters, numbers and "
            "single dashes, start with a letter and do not end with a dash "
            f"(max {IDENTIFIER_MAX_LENGTH} chars)"
        )
    return value


def _check_provider_name(value: str) -> str:
    if value == DEFAULT_PROVIDER_NAME:
        return value
    return _check_identifier(value)


Identifier = Annotated[str, AfterValidator(_check_identifier)]

# The sentinel is reserved: it never satisfies the identifier grammar but is a valid provider name.
ProviderName = Annotated[str, AfterValidator(_check_provider_name)]


def identifier_map(value_type: Any) -> Any:
    """Keyed mapping type whose keys must be provider names."""
    return dict[ProviderName, value_type]
