"""
AuthenticatedUser Value Object - The caller of a core operation.
"""

from dataclasses import dataclass

from hireflow.domain.entities import UserRole


@dataclass(frozen=True)
class AuthenticatedUser:
    """
    Immutable identity of the caller, supplied by the identity provider.

    Passed explicitly into every core operation; the core treats it as
    trusted input and keeps no session state of its own.

    Attributes:
        id: User id
        role: Role for this session
        email: Contact email (may be empty)
    """

    id: str
    role: UserRole
    email: str = ""

    def __post_init__(self) -> None:
        """Validate identity and normalize role."""
        if not self.id:
            raise ValueError("id is required")
        if isinstance(self.role, str):
            object.__setattr__(self, "role", UserRole(self.role))

    def has_role(self, role: UserRole) -> bool:
        return self.role == role

    def to_dict(self) -> dict:
        """Convert to dictionary for token payloads."""
        return {"id": self.id, "role": self.role.value, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict) -> "AuthenticatedUser":
        """Create AuthenticatedUser from a token payload."""
        return cls(
            id=data["id"],
            role=UserRole(data["role"]),
            email=data.get("email", ""),
        )
