from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from kidpoints.database.base_class import Base
from datetime import datetime


class ChildBadge(Base):
    __tablename__ = "child_badges"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    child_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    badge_id = Column(Integer, ForeignKey("badges.id", ondelete="CASCADE"), nullable=False)
    date_earned = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        UniqueConstraint("child_id", "badge_id", name="uq_child_badges_child_badge"),
    )
    child = relationship("User", back_populates="badges")
    badge = relationship("Badge", back_populates="children")
