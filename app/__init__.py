"""Taskboard: All Tasks dashboard API and client."""
