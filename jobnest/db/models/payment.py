from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from jobnest.db.base import Base


class Payment(Base):
    """Completed activation payment. Rows are written once and never updated."""
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    gateway_order_id = Column(String(255), nullable=False)
    gateway_payment_id = Column(String(255), unique=True, nullable=False)
    status = Column(String(20), nullable=False)  # pending | completed | failed
    amount = Column(Integer, nullable=False)  # minor units
    currency = Column(String(10), nullable=False)
    paid_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Payment(id={self.id}, user_id={self.user_id}, status='{self.status}')>"
