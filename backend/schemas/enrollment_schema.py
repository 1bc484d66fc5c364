from schemas.course_schema import UserResponseMinimal
from schemas.user_schema import CourseResponseMinimal
from models.enrollment_model import EnrollmentRole
from pydantic import BaseModel
from uuid import UUID

# Examples
UUID_ENROLLMENT = "11111111-2222-3333-4444-555555555555"
UUID_USER = "9f8f5e64-5717-4562-b3fc-2c963f66afa6"
UUID_COURSE = "3fa85f64-5717-4562-b3fc-2c963f66afa6"

# Create Enrollment schema
class EnrollmentCreate(BaseModel):
    role: EnrollmentRole = EnrollmentRole.STUDENT

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "role": "STUDENT"
            }]
        }
    }

# Response Enrollment schema
class EnrollmentResponse(BaseModel):
    id: UUID
    role: EnrollmentRole
    user: UserResponseMinimal
    course: CourseResponseMinimal

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [{
                "id": UUID_ENROLLMENT,
                "role": "STUDENT",
                "user": {
                    "id": UUID_USER,
                    "name": "John Student",
                    "email": "john@student.com"
                },
                "course": {
                    "id": UUID_COURSE,
                    "title": "React Fundamentals",
                    "level": "BEGINNER"
                }
            }]
        }
    }
