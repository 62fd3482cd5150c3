from enum import Enum


class UserRole(str, Enum):
    CLIENT = "client"
    ADMIN = "admin"

    def __str__(self):
        return self.value


class QuoteStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def __str__(self):
        return self.value


VALID_QUOTE_STATUSES = {status.value for status in QuoteStatus}
