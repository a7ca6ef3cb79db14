"""
Healthcare Bounded Context

Patients, organizations, doctors, appointments and medical records.
"""
