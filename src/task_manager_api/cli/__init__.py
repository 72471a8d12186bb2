"""Command line interface for the Task Manager API."""
