from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from kidpoints.database.base_class import Base


class Reward(Base):
    __tablename__ = "rewards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(512), nullable=True)
    image_url = Column(String(512), nullable=True)
    points_cost = Column(Integer, nullable=False)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    is_global = Column(Boolean, default=True)
