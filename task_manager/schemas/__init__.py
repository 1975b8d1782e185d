"""Pydantic schemas for Task Manager."""
