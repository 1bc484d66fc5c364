from sqlalchemy import Column, String, Text, Enum, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from models.base_model import IdMixin
from config.database import Base
import enum

# Define level enumeration
class CourseLevel(enum.Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"

def _utcnow():
    return datetime.now(timezone.utc)

# Define course model
class Course(IdMixin, Base):
    __tablename__ = "courses"

    title = Column(String(200), nullable = False)
    description = Column(Text, nullable = False)
    level = Column(Enum(CourseLevel), nullable = False)
    created_at = Column(DateTime(timezone = True), nullable = False, default = _utcnow)
    updated_at = Column(DateTime(timezone = True), nullable = False, default = _utcnow, onupdate = _utcnow)

    # Deleting a course removes its enrollments
    enrollments = relationship(
        "Enrollment",
        back_populates = "course",
        cascade = "all, delete-orphan",
        order_by = "Enrollment.id",
    )
