"""
HireHub
A job board backend: employers post jobs, job seekers apply with resumes.

Architecture:
- Routes: FastAPI routers, one per resource
- Services: validation, orchestration, notifications
- Repositories: SQLAlchemy queries for one entity each
"""

__version__ = "1.0.0"
