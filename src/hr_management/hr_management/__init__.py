"""HR Management package.

Organized by feature modules (employees, attendance, projects, analytics, ...)
with a thin Flask controller layer over service/repository layers that talk
to a table-oriented Record Store.
"""
