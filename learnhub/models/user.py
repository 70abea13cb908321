# learnhub/models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from learnhub.db.base import Base

ROLE_NORMAL = "normal"
ROLE_TEACHER = "teacher"
ROLE_ADMIN = "admin"
ROLES = (ROLE_NORMAL, ROLE_TEACHER, ROLE_ADMIN)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    image = Column(String(500), nullable=True)
    role = Column(String(20), nullable=False, default=ROLE_NORMAL)  # normal / teacher / admin
    created_at = Column(DateTime(timezone=True), server_default=func.now())
