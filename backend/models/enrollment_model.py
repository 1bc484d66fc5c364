from sqlalchemy import Column, ForeignKey, Enum, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship
from models.base_model import IdMixin
from config.database import Base
import enum

# Define role enumeration
class EnrollmentRole(enum.Enum):
    STUDENT = "STUDENT"
    PROFESSOR = "PROFESSOR"

# Define enrollment model, one row per (user, course)
class Enrollment(IdMixin, Base):
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name = "uq_enrollment_user_course"),
    )

    user_id = Column(Uuid, ForeignKey("users.id", ondelete = "CASCADE"), nullable = False, index = True)
    course_id = Column(Uuid, ForeignKey("courses.id", ondelete = "CASCADE"), nullable = False, index = True)
    role = Column(Enum(EnrollmentRole), nullable = False, default = EnrollmentRole.STUDENT)

    user = relationship("User", back_populates = "enrollments")
    course = relationship("Course", back_populates = "enrollments")
