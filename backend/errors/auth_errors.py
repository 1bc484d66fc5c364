class NotAuthenticatedError(Exception):
    def __init__(self):
        super().__init__("Not authenticated")

class NotAuthorizedError(Exception):
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Not authorized to {action} this course")
