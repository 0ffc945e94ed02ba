"""User domain model — maps to the 'users' table."""

import uuid

from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship

from accounts.infrastructure.database import Base
from accounts.domain.models.phone import Phone  # noqa: F401  (mapper for "Phone")


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # password hash
    token = Column(String(1024), nullable=True)
    is_active = Column(Boolean, nullable=False, default=False)
    created = Column(DateTime(timezone=True), nullable=True)
    modified = Column(DateTime(timezone=True), nullable=True)
    last_login = Column(DateTime(timezone=True), nullable=True)

    phones = relationship(
        "Phone",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Phone.id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
