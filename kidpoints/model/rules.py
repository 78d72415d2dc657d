from sqlalchemy import Column, String, Integer, ForeignKey
from kidpoints.database.base_class import Base


class Rule(Base):
    __tablename__ = "rules"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    parent_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(512), nullable=False)
    points = Column(Integer, nullable=False)
