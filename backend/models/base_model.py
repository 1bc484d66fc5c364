from sqlalchemy import Column, Uuid
import uuid

# Shared primary key for every table
class IdMixin:
    id = Column(Uuid, primary_key = True, default = uuid.uuid4)
