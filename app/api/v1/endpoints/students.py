from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends
from app.api.deps import get_store
from app.services.student.student import StudentStore
from app.schemas.student import StudentCreate, StudentMessage, StudentRead, StudentUpdate

router = APIRouter()


@router.post("/add_student", response_model=StudentMessage)
def add_student(
    payload: Dict[str, Any] = Body(...),
    store: StudentStore = Depends(get_store)
):
    """
    Add a new student

    Requires:
    - **name**: at least 2 characters
    - **email**: valid address, must be unique
    - **age**: 1 to 149
    - **gender**: M, F or O (any case)
    """
    student = StudentCreate.model_validate(payload)
    student_id = store.insert(student)
    return StudentMessage(message="Student added successfully", id=student_id)


@router.get("/students", response_model=List[StudentRead])
def get_students(store: StudentStore = Depends(get_store)):
    """
    List every student, oldest first
    """
    return store.select_all()


@router.get("/student/{student_id}", response_model=StudentRead)
def get_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Get one student by ID
    """
    return store.select_by_id(student_id)


@router.put("/student/{student_id}", response_model=StudentMessage)
def update_student(
    student_id: int,
    payload: Dict[str, Any] = Body(...),
    store: StudentStore = Depends(get_store)
):
    """
    Replace all fields of a student
    """
    student = StudentUpdate.model_validate(payload)
    store.update(student_id, student)
    return StudentMessage(message="Student updated successfully", id=student_id)


@router.delete("/student/{student_id}", response_model=StudentMessage)
def delete_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Delete a student
    """
    store.delete(student_id)
    return StudentMessage(message="Student deleted successfully", id=student_id)
