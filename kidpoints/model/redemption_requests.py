import enum
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from kidpoints.database.base_class import Base
from datetime import datetime


class RedemptionStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RedemptionRequest(Base):
    __tablename__ = "redemption_requests"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    child_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    reward_id = Column(Integer, ForeignKey("rewards.id", ondelete="CASCADE"), nullable=False)
    request_date = Column(DateTime, default=datetime.now, nullable=False)
    status = Column(String(10), default=RedemptionStatus.PENDING.value, nullable=False)
    note = Column(String(512), nullable=True)

    child = relationship("User", back_populates="redemption_requests")
    reward = relationship("Reward")
