from models.enrollment_model import EnrollmentRole
from models.course_model import CourseLevel
from pydantic import BaseModel, Field
from typing import List
from uuid import UUID

# Examples
UUID_USER = "9f8f5e64-5717-4562-b3fc-2c963f66afa6"
UUID_COURSE = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
UUID_ENROLLMENT = "77777777-8888-9999-aaaa-bbbbbbbbbbbb"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# Embedded schemas
class CourseResponseMinimal(BaseModel):
    id: UUID
    title: str
    level: CourseLevel

    model_config = {
        "from_attributes": True
    }

class EnrollmentWithCourse(BaseModel):
    id: UUID
    role: EnrollmentRole
    course: CourseResponseMinimal

    model_config = {
        "from_attributes": True
    }

# Base User schema
class UserBase(BaseModel):
    name: str = Field(min_length = 1, max_length = 100)
    email: str = Field(max_length = 100, pattern = EMAIL_PATTERN)

# Create User schema
class UserCreate(UserBase):
    password: str = Field(min_length = 6, max_length = 72)

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "name": "John Student",
                "email": "john@student.com",
                "password": "password123"
            }]
        }
    }

# Response User schema
class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    enrollments: List[EnrollmentWithCourse] = []

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [{
                "id": UUID_USER,
                "name": "John Student",
                "email": "john@student.com",
                "enrollments": [{
                    "id": UUID_ENROLLMENT,
                    "role": "STUDENT",
                    "course": {
                        "id": UUID_COURSE,
                        "title": "React Fundamentals",
                        "level": "BEGINNER"
                    }
                }]
            }]
        }
    }

# Auth schemas
class LoginRequest(BaseModel):
    email: str = Field(min_length = 1)
    password: str = Field(min_length = 1)

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "email": "john@student.com",
                "password": "password123"
            }]
        }
    }

class AuthPayload(BaseModel):
    token: str
    user: UserResponse

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {
                    "id": UUID_USER,
                    "name": "John Student",
                    "email": "john@student.com",
                    "enrollments": []
                }
            }]
        }
    }
