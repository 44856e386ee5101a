from sqlalchemy import Column, String, Enum
from foodhub.models.base import BaseModel
from foodhub.core.enums import AccountType, enum_values


class User(BaseModel):
    __tablename__ = "users"
    name = Column(String(120), nullable=False)
    email = Column(String(120), unique=True, nullable=False, index=True)
    phone = Column(String(40))
    account_type = Column(
        Enum(AccountType, values_callable=enum_values),
        nullable=False,
        default=AccountType.CLIENT,
    )
