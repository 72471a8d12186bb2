"""FastAPI web layer for the Task Manager API."""
