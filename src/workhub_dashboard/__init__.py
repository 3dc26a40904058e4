"""Workhub dashboard package.

Organized by feature modules (attendance, leave, report, users) with a thin
Flask controller layer over service/repository layers. Attendance figures are
derived from records served by the upstream workhub REST API.
"""
