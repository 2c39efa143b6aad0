"""
Healthcare Application Layer

Repository ports, request DTOs and use cases.
"""
