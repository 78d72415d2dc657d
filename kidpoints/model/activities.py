from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from kidpoints.database.base_class import Base
from datetime import datetime


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    child_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # name of the rule that produced the activity
    description = Column(String(255), nullable=False)
    points = Column(Integer, nullable=False)
    date = Column(DateTime, default=datetime.now, nullable=False)

    child = relationship("User", back_populates="activities")
