"""
Hospital Records

Patients, doctors, appointments and medical histories with an appointment
scheduling engine and ownership-aware deletion rules.
"""

__version__ = "0.1.0"
