import os

# Capacidade máxima de cada turma criada pelo serviço
CLASS_CAPACITY = int(os.getenv("CLASS_CAPACITY", "40"))

# Limite usado pelo alerta de faltas por disciplina
ABSENCE_LIMIT = int(os.getenv("ABSENCE_LIMIT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = bool(int(os.getenv("DEBUG", "0")))
