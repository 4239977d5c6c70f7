"""Facilities Tracker package.

Feature modules (colleges, work_entries, employees, attendance, dashboard,
reports) each keep a pure model/service layer behind a thin Flask controller
and a repository protocol backed by MySQL.
"""
