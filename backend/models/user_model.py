from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from models.base_model import IdMixin
from config.database import Base

# Define user model
class User(IdMixin, Base):
    __tablename__ = "users"

    name = Column(String(100), nullable = False)
    email = Column(String(100), unique = True, nullable = False)
    password = Column(Text, nullable = False)

    enrollments = relationship(
        "Enrollment",
        back_populates = "user",
        cascade = "all, delete-orphan",
        order_by = "Enrollment.id",
    )
