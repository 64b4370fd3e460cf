"""Email value object.

Provides normalized email addresses for account identification.

Addresses come from OAuth providers that already own them, so only the
shape is checked: exactly one ``@`` with something on either side. Quotes,
non-ASCII characters and dotless domains are all accepted.
"""

from dataclasses import dataclass

from voicehub_identity.domain.account.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a normalized email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.value.strip().lower()

        local, at, domain = normalized.partition("@")
        if not at or not local or not domain or "@" in domain:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
