"""Shared utilities for the Task Manager API."""
