# learnhub/models/course.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Float
from sqlalchemy.sql import func
from learnhub.db.base import Base

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"


class Course(Base):
    """A class offered on the marketplace."""

    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)  # teacher display name
    email = Column(String(255), nullable=False, index=True)  # owner
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(500), nullable=False)

    # pending / approved / rejected
    status = Column(String(20), nullable=False, default=STATUS_PENDING, index=True)
    total_enrollments = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
