"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskComplexity, ...) and wire helpers
- task_store.py: in-memory store + dependency tree / ordering queries
"""
