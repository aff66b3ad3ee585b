"""
Task subsystem.

Components:
- task_models.py: data structures (TaskView, Priority, TaskStatus)
- task_filters.py: typed predicates, Filter (AND) and the token form
- task_api.py: list-level helpers (filter_tasks, sort_tasks, filter_from_action)
"""
