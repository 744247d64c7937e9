"""Ponto engine package.

Attendance and time-accounting rules organized by feature modules
(timerecords, hours, vacations, overtime, ...) with service/repository layers.
"""
