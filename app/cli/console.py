"""
Interactive console for managing student records.

Every prompt re-asks until the answer passes validation. Store failures are
printed and the menu comes back; only option 5 (or end of input) exits.
"""
from typing import Callable, Optional

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import BaseAppException
from app.core.logging import setup_logging
from app.schemas.student import StudentCreate, StudentRead
from app.services.student import validators
from app.services.student.student import StudentStore

MENU = """
Student Management System
1. Add Student
2. View All Students
3. Update Student
4. Delete Student
5. Exit"""


class Console:
    """Menu loop over a StudentStore, with injectable input and output."""

    def __init__(
        self,
        store: StudentStore,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.store = store
        self.input = input_fn
        self.output = output_fn

    def ask(self, prompt: str, is_valid: Callable[[str], bool], error: str) -> str:
        while True:
            answer = self.input(prompt)
            if is_valid(answer):
                return answer
            self.output(f"{error}. Try again.")

    def ask_student(self) -> StudentCreate:
        name = self.ask(
            "Please enter student name (minimum 2 characters): ",
            validators.is_valid_name, validators.NAME_MESSAGE)
        email = self.ask(
            "Please enter valid email address: ",
            validators.is_valid_email, validators.EMAIL_MESSAGE)
        age = self.ask(
            f"Please enter age ({validators.MIN_AGE}-{validators.MAX_AGE}): ",
            validators.is_valid_age, validators.AGE_MESSAGE)
        gender = self.ask(
            "Please enter gender (M/F/O): ",
            validators.is_valid_gender, validators.GENDER_MESSAGE)
        return StudentCreate(name=name, email=email, age=age, gender=gender)

    def ask_student_id(self) -> int:
        answer = self.ask(
            "Please enter student ID: ",
            validators.is_valid_id,
            "Invalid ID. Please enter a positive number")
        return validators.parse_int(answer)

    def add_student(self) -> None:
        student_id = self.store.insert(self.ask_student())
        self.output(f"Student data inserted successfully (ID: {student_id})")

    def view_students(self) -> None:
        students = self.store.select_all()
        self.output("\nAll Students:")
        if not students:
            self.output("No students found.")
        for student in students:
            self.output(format_student(student))

    def update_student(self) -> None:
        student_id = self.ask_student_id()
        self.store.update(student_id, self.ask_student())
        self.output("Student updated successfully")

    def delete_student(self) -> None:
        self.store.delete(self.ask_student_id())
        self.output("Student deleted successfully")

    def run(self) -> None:
        actions = {
            "1": self.add_student,
            "2": self.view_students,
            "3": self.update_student,
            "4": self.delete_student,
        }
        while True:
            self.output(MENU)
            try:
                choice = self.input("Enter your choice (1-5): ").strip()
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
            if choice == "5":
                break
            action = actions.get(choice)
            if action is None:
                self.output("Invalid choice. Please enter a number between 1 and 5.")
                continue
            try:
                action()
            except BaseAppException as e:
                self.output(f"Error: {e.message}")
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
        self.output("Goodbye!")


def format_student(student: StudentRead) -> str:
    return (
        f"ID: {student.id}, Name: {student.name}, Email: {student.email}, "
        f"Age: {student.age}, Gender: {student.gender}"
    )


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    store = StudentStore.from_settings(settings)
    try:
        store.ensure_table()
    except BaseAppException as e:
        print(f"Error: {e.message}")
        raise SystemExit(1) from e
    Console(store).run()


if __name__ == "__main__":
    main()
