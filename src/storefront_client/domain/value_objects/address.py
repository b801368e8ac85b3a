from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Address:
    full_name: str
    address: str
    city: str
    zip_code: str
    country: str
    phone: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "fullName": self.full_name,
            "address": self.address,
            "city": self.city,
            "zipCode": self.zip_code,
            "country": self.country,
        }
        if self.phone:
            payload["phone"] = self.phone
        return payload
