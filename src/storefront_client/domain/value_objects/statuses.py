from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class ReturnStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ProjectStatus(str, Enum):
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"
