"""
taskboard: a small in-memory task board.

Packages:
- core: ids, repository, ports, application state
- people: Person / Employee
- tasks: task models, filters, service, file export, background reporter
- cli: bootstrap and the demo entrypoint
"""

__version__ = "0.1.0"
