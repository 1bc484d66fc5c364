from pydantic import BaseModel, Field, model_validator
from models.enrollment_model import EnrollmentRole
from models.course_model import CourseLevel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

# Examples
UUID_COURSE = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
UUID_PROFESSOR = "9f8f5e64-5717-4562-b3fc-2c963f66afa6"
UUID_ENROLLMENT = "11111111-2222-3333-4444-555555555555"
ISO_TS = "2025-01-15T14:32:00Z"

# Embedded User schema
class UserResponseMinimal(BaseModel):
    id: UUID
    name: str
    email: str

    model_config = {
        "from_attributes": True
    }

class EnrollmentWithUser(BaseModel):
    id: UUID
    role: EnrollmentRole
    user: UserResponseMinimal

    model_config = {
        "from_attributes": True
    }

# Base Course schema
class CourseBase(BaseModel):
    title: str = Field(min_length = 1, max_length = 200)
    description: str = Field(min_length = 1)
    level: CourseLevel

# Create Course schema
class CourseCreate(CourseBase):

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "title": "React Fundamentals",
                "description": "Learn the basics of React including components, state management, and hooks.",
                "level": "BEGINNER"
            }]
        }
    }

# Update Course schema, absent fields keep their stored value
class CourseUpdate(BaseModel):
    title: Optional[str] = Field(default = None, min_length = 1, max_length = 200)
    description: Optional[str] = Field(default = None, min_length = 1)
    level: Optional[CourseLevel] = None

    @model_validator(mode = "after")
    def reject_explicit_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "description": "Updated syllabus with hooks and context",
                "level": "INTERMEDIATE"
            }]
        }
    }

# Response Course schema
class CourseResponse(CourseBase):
    id: UUID
    created_at: datetime
    updated_at: datetime
    enrollments: List[EnrollmentWithUser] = []

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [{
                "id": UUID_COURSE,
                "title": "React Fundamentals",
                "description": "Learn the basics of React including components, state management, and hooks.",
                "level": "BEGINNER",
                "created_at": ISO_TS,
                "updated_at": ISO_TS,
                "enrollments": [{
                    "id": UUID_ENROLLMENT,
                    "role": "PROFESSOR",
                    "user": {
                        "id": UUID_PROFESSOR,
                        "name": "Dr. Jane Professor",
                        "email": "jane@professor.com"
                    }
                }]
            }]
        }
    }

class SuccessResponse(BaseModel):
    success: bool = True
