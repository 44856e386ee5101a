from enum import Enum


class AccountType(str, Enum):
    CLIENT = "client"
    VENDOR = "vendor"
    ADMIN = "admin"

    def __str__(self):
        return self.value


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    def __str__(self):
        return self.value


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    MOBILE_MONEY = "mobile_money"

    def __str__(self):
        return self.value


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    def __str__(self):
        return self.value


class SpiceLevel(str, Enum):
    MILD = "mild"
    MEDIUM = "medium"
    HOT = "hot"
    VERY_HOT = "very_hot"

    def __str__(self):
        return self.value


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    UNDER_REVIEW = "under_review"

    def __str__(self):
        return self.value


class ApplicationKind(str, Enum):
    VENDOR = "vendor"
    DISH = "dish"
    REVIEW = "review"

    def __str__(self):
        return self.value


class ApplicationDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
    REVIEW = "review"

    def __str__(self):
        return self.value


class AuditAction(str, Enum):
    APPROVE_APPLICATION = "approve_application"
    REJECT_APPLICATION = "reject_application"
    REVIEW_APPLICATION = "review_application"

    def __str__(self):
        return self.value


def enum_values(enum_cls) -> list:
    """Persist enum values ("out_for_delivery") rather than member names."""
    return [member.value for member in enum_cls]
