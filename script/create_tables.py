# create_tables.py
from sqlalchemy import inspect

from kidpoints.model import users, activities, rules, rewards, redemption_requests, badges, child_badges
from kidpoints.database.base_class import Base
from kidpoints.database.session import SQLALCHEMY_DATABASE_URL, get_engine


engine = get_engine(SQLALCHEMY_DATABASE_URL)

Base.metadata.create_all(bind=engine)
print("Tables created.")

inspector = inspect(engine)
print("Existing tables:", inspector.get_table_names())
