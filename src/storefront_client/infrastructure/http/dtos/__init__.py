from storefront_client.infrastructure.http.dtos.resource_models import (
    ApiModel,
    BlogPost,
    ContactMessage,
    Order,
    OrderItem,
    PagedResult,
    Product,
    Project,
    ReturnRequest,
    ServiceOffering,
    SubOrder,
    UserMessage,
)

__all__ = [
    "ApiModel",
    "BlogPost",
    "ContactMessage",
    "Order",
    "OrderItem",
    "PagedResult",
    "Product",
    "Project",
    "ReturnRequest",
    "ServiceOffering",
    "SubOrder",
    "UserMessage",
]
