from fastapi import Request
from app.services.student.student import StudentStore


def get_store(request: Request) -> StudentStore:
    """
    Dependency returning the record store created at startup.
    The store opens and closes a connection per operation itself.
    """
    return request.app.state.store
