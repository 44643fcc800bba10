import os

# Turmas pequenas deixam os testes de lotação curtos
CLASS_CAPACITY = int(os.getenv("CLASS_CAPACITY", "2"))
ABSENCE_LIMIT = int(os.getenv("ABSENCE_LIMIT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
