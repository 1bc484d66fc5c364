class IntegrityConstraintError(Exception):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Integrity constraint violation during {operation}")
