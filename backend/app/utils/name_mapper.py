"""Conversion between snake_case and camelCase names.

The database uses snake_case columns and API clients use camelCase keys.
Algorithmic conversion covers the regular cases; a ``FieldMappings`` table
overrides it for irregular field names.
"""

import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType

_SNAKE_PATTERN = re.compile(r"_([a-z])")
_CAMEL_PATTERN = re.compile(r"[A-Z]")


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Only an underscore followed by a lowercase letter is rewritten, so
    malformed input is converted as far as possible instead of rejected.
    """
    return _SNAKE_PATTERN.sub(lambda match: match.group(1).upper(), name)


def camel_to_snake(name: str) -> str:
    """Convert a camelCase string to snake_case.

    Every uppercase letter becomes its own segment: ``"ID"`` -> ``"_i_d"``.
    """
    return _CAMEL_PATTERN.sub(lambda match: f"_{match.group(0).lower()}", name)


class FieldMappings(Mapping[str, str]):
    """Immutable snake_case -> camelCase override table.

    The reverse direction is answered from the same table so both
    directions can never drift apart.
    """

    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        pairs = dict(pairs or {})
        targets = list(pairs.values())
        duplicates = sorted({t for t in targets if targets.count(t) > 1})
        if duplicates:
            raise ValueError(f"Duplicate camelCase targets in field mappings: {duplicates}")
        self._pairs = MappingProxyType(pairs)

    def __getitem__(self, snake_name: str) -> str:
        return self._pairs[snake_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"FieldMappings({dict(self._pairs)!r})"

    def camel_for(self, snake_name: str) -> str | None:
        """Override for a snake_case name, if any."""
        return self._pairs.get(snake_name)

    def snake_for(self, camel_name: str) -> str | None:
        """Reverse lookup by value."""
        for snake_name, mapped in self._pairs.items():
            if mapped == camel_name:
                return snake_name
        return None


# Common user fields
USER_FIELD_MAPPINGS = FieldMappings({
    "is_verified": "isVerified",
    "is_active": "isActive",
    "first_name": "firstName",
    "last_name": "lastName",
    "reset_password_token": "resetPasswordToken",
    "reset_password_expires": "resetPasswordExpires",
    "verification_token": "verificationToken",
    "verification_expires": "verificationExpires",
    "last_login": "lastLogin",
    "login_attempts": "loginAttempts",
    "lock_until": "lockUntil",
    "user_id": "userId",
})


class NameMapper:
    """Field name conversion backed by an injected override table."""

    def __init__(self, mappings: FieldMappings | None = None) -> None:
        self.mappings = mappings if mappings is not None else FieldMappings()

    snake_to_camel = staticmethod(snake_to_camel)
    camel_to_snake = staticmethod(camel_to_snake)

    def map_field(self, name: str, to_camel: bool = True) -> str:
        """Get the equivalent field name in the opposite convention.

        Args:
            name: Original field name
            to_camel: Convert to camelCase when True, otherwise to snake_case

        Returns:
            The override from the mapping table, or the algorithmic conversion
        """
        if to_camel:
            mapped = self.mappings.camel_for(name)
            return mapped if mapped is not None else snake_to_camel(name)

        mapped = self.mappings.snake_for(name)
        return mapped if mapped is not None else camel_to_snake(name)


default_name_mapper = NameMapper(USER_FIELD_MAPPINGS)


def map_field(name: str, to_camel: bool = True) -> str:
    """Map a field name using the default override table."""
    return default_name_mapper.map_field(name, to_camel)
