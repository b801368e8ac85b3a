from datetime import date

import pytest
from unittest.mock import MagicMock

from storefront_client.application.dtos.forms.content_forms import BlogPostForm, ProjectForm, ServiceForm
from storefront_client.application.dtos.forms.product_form import ProductForm
from storefront_client.application.services.back_office_service import BackOfficeService
from storefront_client.domain.exceptions.authentication_required_error import AuthenticationRequiredError
from storefront_client.domain.exceptions.form_validation_error import FormValidationError
from storefront_client.domain.value_objects.statuses import OrderStatus, ProjectStatus
from storefront_client.infrastructure.http.dtos.resource_models import Product


@pytest.fixture
def auth_session():
    session = MagicMock()
    session.is_admin.return_value = True
    return session


@pytest.fixture
def products_api():
    api = MagicMock()
    api.create.return_value = Product(id="new", title="Mic")
    api.update.return_value = Product(id="p-1", title="Mic")
    return api


@pytest.fixture
def orders_api():
    return MagicMock()


@pytest.fixture
def admin_api():
    return MagicMock()


@pytest.fixture
def content_apis():
    return MagicMock(), MagicMock(), MagicMock()


@pytest.fixture
def service(auth_session, products_api, orders_api, admin_api, content_apis):
    blog_api, projects_api, services_api = content_apis
    return BackOfficeService(auth_session, products_api, orders_api, admin_api, blog_api, projects_api, services_api)


def _valid_form():
    return ProductForm(name="Mic", price="59", category="Audio", description="USB mic", hs_code="8518.10", stock="3")


def test_save_new_product_creates(service, products_api):
    product = service.save_product(_valid_form())

    assert product.id == "new"
    assert products_api.create.call_args.args[0]["title"] == "Mic"
    products_api.update.assert_not_called()


def test_save_existing_product_updates(service, products_api):
    service.save_product(_valid_form(), product_id="p-1")

    products_api.update.assert_called_once()
    assert products_api.update.call_args.args[0] == "p-1"


def test_invalid_product_is_not_sent(service, products_api):
    with pytest.raises(FormValidationError):
        service.save_product(ProductForm(name="Mic"))
    products_api.create.assert_not_called()


def test_non_admin_is_rejected(service, auth_session, products_api):
    auth_session.is_admin.return_value = False

    with pytest.raises(AuthenticationRequiredError):
        service.delete_product("p-1")
    products_api.delete.assert_not_called()


def test_update_order_status(service, orders_api):
    service.update_order_status("o-1", OrderStatus.SHIPPED, tracking_number="TRK1", sub_order_id="s-1")

    orders_api.update.assert_called_once_with("o-1", status=OrderStatus.SHIPPED, tracking_number="TRK1", sub_order_id="s-1")


def test_load_product_form_for_edit(service, products_api):
    products_api.get.return_value = Product.model_validate({"id": "p-1", "title": "Mic", "price": "59.00"})

    form = service.load_product_form("p-1")

    assert form.name == "Mic"
    products_api.get.assert_called_once_with("p-1")
    assert service.load_product_form().name == ""


def test_list_users_and_orders(service, admin_api, orders_api):
    service.list_users(page=2, limit=20)
    service.list_orders(page=1)

    admin_api.list_users.assert_called_once_with(page=2, limit=20)
    orders_api.list.assert_called_once_with(page=1, limit=None)


def test_save_blog_post_creates_and_updates(service, content_apis):
    blog_api, _, _ = content_apis
    form = BlogPostForm(title="Launch", excerpt="We shipped", content="<p>Hi</p>", featured_image="/launch.png")

    service.save_blog_post(form)
    service.save_blog_post(form, post_id="b-1")

    blog_api.create.assert_called_once_with(
        title="Launch", excerpt="We shipped", content="<p>Hi</p>", featured_image="/launch.png", published=False
    )
    assert blog_api.update.call_args.args == ("b-1",)
    assert blog_api.update.call_args.kwargs["title"] == "Launch"


def test_blog_post_without_image_is_not_sent(service, content_apis):
    blog_api, _, _ = content_apis

    with pytest.raises(FormValidationError) as exc_info:
        service.save_blog_post(BlogPostForm(title="Launch", excerpt="We shipped"))

    assert exc_info.value.field_errors == {"featured_image": "Please fill all required fields including image!"}
    blog_api.create.assert_not_called()


def test_save_project_splits_features_and_dates_new_projects(service, content_apis):
    _, projects_api, _ = content_apis
    form = ProjectForm(title="Lab", description="Audio lab", client="ACME", features="Mixing, , Mastering ", image="/lab.png")

    service.save_project(form)

    kwargs = projects_api.create.call_args.kwargs
    assert kwargs["features"] == ["Mixing", "Mastering"]
    assert kwargs["images"] == ["/lab.png"]
    assert kwargs["status"] is ProjectStatus.COMPLETED
    assert kwargs["year"] == str(date.today().year)


def test_save_service_updates_with_defaults(service, content_apis):
    _, _, services_api = content_apis

    service.save_service(ServiceForm(title="Repair", description="Fixes", features="Diagnostics"), service_id="s-1")

    services_api.update.assert_called_once_with(
        "s-1", title="Repair", description="Fixes", features=["Diagnostics"], icon_name="Cpu", active=True
    )


def test_service_requires_title_and_description(service, content_apis):
    _, _, services_api = content_apis

    with pytest.raises(FormValidationError):
        service.save_service(ServiceForm(title="Repair"))
    services_api.create.assert_not_called()


def test_content_deletes_require_admin(service, auth_session, content_apis):
    blog_api, projects_api, services_api = content_apis
    service.delete_blog_post("b-1")
    service.delete_project("pr-1")
    service.delete_service("s-1")

    blog_api.delete.assert_called_once_with("b-1")
    projects_api.delete.assert_called_once_with("pr-1")
    services_api.delete.assert_called_once_with("s-1")

    auth_session.is_admin.return_value = False
    with pytest.raises(AuthenticationRequiredError):
        service.delete_project("pr-2")
    with pytest.raises(AuthenticationRequiredError):
        service.save_service(ServiceForm(title="Repair", description="Fixes"))
    projects_api.delete.assert_called_once()
