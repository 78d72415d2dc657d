from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from kidpoints.database.base_class import Base
from kidpoints.model.activities import Activity
from kidpoints.model.child_badges import ChildBadge
from kidpoints.model.redemption_requests import RedemptionRequest


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(10), nullable=False)  # "parent" | "child"
    parent_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    age = Column(Integer, nullable=True)
    total_points = Column(Integer, default=0, nullable=False)
    image_url = Column(String(512), nullable=True)

    parent = relationship("User", remote_side=[id], back_populates="children")
    children = relationship("User", back_populates="parent")
    activities = relationship("Activity", back_populates="child", cascade="all, delete-orphan")
    badges = relationship("ChildBadge", back_populates="child", cascade="all, delete-orphan")
    redemption_requests = relationship("RedemptionRequest", back_populates="child", cascade="all, delete-orphan")

    @property
    def is_parent(self) -> bool:
        return self.role == "parent"

    @property
    def is_child(self) -> bool:
        return self.role == "child"
