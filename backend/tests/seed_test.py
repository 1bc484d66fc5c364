from seed import SEED_PASSWORD, seed
from services.auth_service import login
from models.enrollment_model import Enrollment, EnrollmentRole
from models.course_model import Course
from models.user_model import User

def test_seed_populates_demo_data(db):
    seed(db)

    assert db.query(User).count() == 3
    assert db.query(Course).count() == 4
    professor = db.query(User).filter(User.email == "jane@professor.com").first()
    roles = [e.role for e in db.query(Enrollment).filter(Enrollment.user_id == professor.id)]
    assert roles == [EnrollmentRole.PROFESSOR] * 4

    student = db.query(User).filter(User.email == "john@student.com").first()
    assert db.query(Enrollment).filter(Enrollment.user_id == student.id).count() == 2

    _, user = login(db, "john@student.com", SEED_PASSWORD)
    assert user.id == student.id

def test_seed_is_repeatable(db):
    seed(db)
    seed(db)
    assert db.query(User).count() == 3
    assert db.query(Enrollment).count() == 6
