"""Demographic profile collected during onboarding."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DemographicProfile:
    """Optional demographic fields of an account.

    All fields are unset for freshly provisioned OAuth accounts; they are
    filled in by the profile setup step of the frontend.
    """

    age: str | None = None
    gender: str | None = None
    languages: tuple[str, ...] | None = field(default=None)
    location: str | None = None
    constituency: str | None = None
    educational_background: str | None = None
    employment_status: str | None = None
    phone_number: str | None = None
    id_number: str | None = None

    def __post_init__(self) -> None:
        if self.languages is not None and not isinstance(self.languages, tuple):
            object.__setattr__(self, "languages", tuple(self.languages))

    @classmethod
    def empty(cls) -> "DemographicProfile":
        return cls()
