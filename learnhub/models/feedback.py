# learnhub/models/feedback.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from learnhub.db.base import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, nullable=True, index=True)

    name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=False)
    image = Column(String(500), nullable=True)
    rating = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
