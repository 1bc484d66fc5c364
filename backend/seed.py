from models.enrollment_model import Enrollment, EnrollmentRole
from models.course_model import Course, CourseLevel
from config.security import hash_password
from config.logging import setup_logging
from config.database import Database
from models.user_model import User
from sqlalchemy.orm import Session

logger = setup_logging()

SEED_PASSWORD = "password123"

COURSES = [
    ("React Fundamentals",
     "Learn the basics of React including components, state management, and hooks. "
     "Perfect for beginners who want to start building modern web applications.",
     CourseLevel.BEGINNER),
    ("Node.js Backend Development",
     "Master backend development with Node.js, Express, and databases. "
     "Build robust APIs and server-side applications.",
     CourseLevel.INTERMEDIATE),
    ("Full Stack Web Development",
     "Complete full-stack development course covering React, Node.js, databases, and deployment. "
     "Advanced project-based learning.",
     CourseLevel.ADVANCED),
    ("Python for Data Science",
     "Learn Python programming for data analysis, visualization, and machine learning.",
     CourseLevel.INTERMEDIATE),
]


def seed(db: Session):
    logger.info("Clearing existing data")
    db.query(Enrollment).delete()
    db.query(Course).delete()
    db.query(User).delete()

    hashed = hash_password(SEED_PASSWORD)
    student = User(name = "John Student", email = "john@student.com", password = hashed)
    professor = User(name = "Dr. Jane Professor", email = "jane@professor.com", password = hashed)
    admin = User(name = "Admin User", email = "admin@edutech.com", password = hashed)
    db.add_all([student, professor, admin])

    courses = [Course(title = t, description = d, level = lvl) for t, d, lvl in COURSES]
    db.add_all(courses)
    db.flush()

    for course in courses:
        db.add(Enrollment(user_id = professor.id, course_id = course.id, role = EnrollmentRole.PROFESSOR))
    for course in courses[:2]:
        db.add(Enrollment(user_id = student.id, course_id = course.id, role = EnrollmentRole.STUDENT))

    db.commit()
    logger.info("Seeded %d users and %d courses", 3, len(courses))
    return {"users": [student, professor, admin], "courses": courses}


if __name__ == "__main__":
    database = Database().open()
    try:
        with database.session() as db:
            seed(db)
    finally:
        database.close()
