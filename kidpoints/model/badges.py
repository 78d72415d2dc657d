from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from kidpoints.database.base_class import Base


class Badge(Base):
    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(512), nullable=False)
    icon = Column(String(255), nullable=False)
    required_days = Column(Integer, nullable=False)
    # name of the tracked rule, matched against Activity.description
    activity_type = Column(String(255), nullable=False)
    parent_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationship to ChildBadge
    children = relationship("ChildBadge", back_populates="badge", cascade="all, delete-orphan")
