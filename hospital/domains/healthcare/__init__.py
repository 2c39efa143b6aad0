"""
Healthcare bounded context: patients, doctors, appointments and medical histories.
"""
