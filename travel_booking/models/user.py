from pydantic import BaseModel


class UserIdentity(BaseModel):
    """The signed-in user as reported by the auth provider."""

    id: str
    email: str | None = None
    display_name: str | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.email or "Traveler"
