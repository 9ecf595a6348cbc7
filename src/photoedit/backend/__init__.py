"""Photo editor backend (FastAPI + SQLModel)"""
