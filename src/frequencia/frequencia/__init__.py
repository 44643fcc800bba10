"""Frequência package.

Organized by feature modules (students, classrooms, attendance, reports) with
plain domain models and thin service layers that write status lines to the
console.
"""
