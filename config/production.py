import os

CLASS_CAPACITY = int(os.getenv("CLASS_CAPACITY", "40"))
ABSENCE_LIMIT = int(os.getenv("ABSENCE_LIMIT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
