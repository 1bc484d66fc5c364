class AlreadyEnrolledError(Exception):
    def __init__(self, user_id: str, course_id: str):
        self.user_id = user_id
        self.course_id = course_id
        super().__init__("Already enrolled in this course")

class EnrollmentNotFoundError(Exception):
    def __init__(self, user_id: str, course_id: str):
        self.user_id = user_id
        self.course_id = course_id
        super().__init__(f"Enrollment not found for user_id={user_id} course_id={course_id}")
