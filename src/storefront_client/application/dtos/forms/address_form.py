from __future__ import annotations

from storefront_client.application.dtos.forms.base_form import BaseForm
from storefront_client.domain.value_objects.address import Address

REQUIRED_ADDRESS_FIELDS = ("full_name", "address", "city", "zip_code", "country")


class AddressForm(BaseForm):
    full_name: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    country: str = ""
    phone: str = ""

    def collect_errors(self) -> dict[str, str]:
        return {
            name: "Please fill in all shipping information"
            for name in REQUIRED_ADDRESS_FIELDS
            if not getattr(self, name)
        }

    def is_blank(self) -> bool:
        return not self.full_name

    def to_address(self) -> Address:
        return Address(
            full_name=self.full_name,
            address=self.address,
            city=self.city,
            zip_code=self.zip_code,
            country=self.country,
            phone=self.phone or None,
        )
