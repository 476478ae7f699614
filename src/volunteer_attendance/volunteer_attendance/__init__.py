"""Volunteer Attendance package.

Feature modules (tiers, hours, attendance, export) with a thin Flask
controller layer on top of service/repository layers.
"""
