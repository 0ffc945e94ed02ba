"""Phone model — value records owned by a single user ('phones' table)."""

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from accounts.infrastructure.database import Base


class Phone(Base):
    __tablename__ = "phones"

    # Storage key only; a phone is identified by its owner's list
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    number = Column(String(20), nullable=False)
    citycode = Column(String(10), nullable=False)
    countrycode = Column(String(10), nullable=False)

    user = relationship("User", back_populates="phones")

    def __repr__(self):
        return f"<Phone +{self.countrycode} {self.citycode} {self.number}>"
