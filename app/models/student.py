from sqlalchemy import CHAR, Column, Integer, String
from app.core.database import Base, STUDENT_TABLE


class Student(Base):
    __tablename__ = STUDENT_TABLE

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    name = Column("NAME", String(100), nullable=False)
    email = Column("EMAIL", String(100), unique=True, nullable=False)
    age = Column("AGE", Integer, nullable=False)
    gender = Column("GENDER", CHAR(1), nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email!r}>"
