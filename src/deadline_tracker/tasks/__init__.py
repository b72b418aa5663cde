"""
Task subsystem.

Components:
- task_models.py: data structures (Task, FilterMode, Statistics, ...)
- task_store.py: in-memory ordered store that notifies listeners on change
- overdue_monitor.py: polling loop that reports overdue tasks
- task_api.py: command surface used by front-ends
"""
