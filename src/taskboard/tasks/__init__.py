"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskBuilder, TaskStatus, Priority)
- task_filters.py: composable Task -> bool predicates
- task_service.py: status updates and queries over a task repository
- task_export.py: one-line-per-task file export
- task_reporter.py: background thread printing task counts
"""
