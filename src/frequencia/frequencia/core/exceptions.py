class DomainError(Exception):
    """Base exception for business rule violations."""


class StudentError(DomainError):
    """Raised for problems with a student's data or lookup."""


class StudentNotFoundError(StudentError):
    def __init__(self, student_id: int):
        super().__init__(f"Estudante com ID {student_id} não foi encontrado.")
        self.student_id = student_id


class InvalidStudentDataError(StudentError):
    """Raised when a student is built from invalid data."""

    def __init__(self, field: str):
        super().__init__(f"Dados inválidos: {field}")
        self.field = field


class ClassroomError(DomainError):
    """Raised when a classroom membership rule is violated."""


class ClassroomFullError(ClassroomError):
    def __init__(self, capacity: int):
        super().__init__(f"Turma já atingiu a capacidade máxima de {capacity} estudantes.")
        self.capacity = capacity


class DuplicateStudentError(ClassroomError):
    def __init__(self, student_name: str):
        super().__init__(f"Estudante {student_name} já está cadastrado na turma.")
        self.student_name = student_name


class InvalidClassroomDataError(ClassroomError):
    def __init__(self, field: str):
        super().__init__(f"Dados inválidos: {field}")
        self.field = field
