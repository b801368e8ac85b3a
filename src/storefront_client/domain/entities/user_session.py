from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class User(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    profile_picture: Optional[str] = None
    is_admin: bool = False
    marketing_opt_in: bool = False
    wallet_balance: Optional[float] = None
    created_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class UserSession:
    user: Optional[User] = None
    tokens: Optional[TokenPair] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.tokens is not None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin is True
