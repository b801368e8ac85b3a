from storefront_client.application.dtos.forms.account_forms import (
    ForgotPasswordForm,
    ProfileForm,
    RegistrationForm,
    ResetPasswordForm,
)
from storefront_client.application.dtos.forms.address_form import AddressForm
from storefront_client.application.dtos.forms.base_form import BaseForm
from storefront_client.application.dtos.forms.contact_form import ContactForm
from storefront_client.application.dtos.forms.content_forms import BlogPostForm, ProjectForm, ServiceForm
from storefront_client.application.dtos.forms.product_form import ProductForm

__all__ = [
    "AddressForm",
    "BaseForm",
    "BlogPostForm",
    "ContactForm",
    "ForgotPasswordForm",
    "ProductForm",
    "ProfileForm",
    "ProjectForm",
    "RegistrationForm",
    "ResetPasswordForm",
    "ServiceForm",
]
