# learnhub/models/teacher_request.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from learnhub.db.base import Base

STATUS_PENDING = "pending"
STATUS_ACCEPTED = "accepted"
STATUS_REJECTED = "rejected"


class TeacherRequest(Base):
    __tablename__ = "teacher_requests"

    id = Column(Integer, primary_key=True, index=True)
    # one request per email, whatever its status
    email = Column(String(255), unique=True, nullable=False, index=True)

    name = Column(String(100), nullable=False)
    image = Column(String(500), nullable=False)
    title = Column(String(255), nullable=False)
    experience = Column(String(50), nullable=False)
    category = Column(String(100), nullable=False)

    # pending / accepted / rejected
    status = Column(String(20), nullable=False, default=STATUS_PENDING, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
