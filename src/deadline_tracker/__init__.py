"""
Personal task/deadline tracker.

Packages:
- tasks: task model, in-memory store, overdue monitor, command surface
- metrics: statistics and the weekly completion histogram
- core: ports (Protocols) and application state
- cli / connectors: console front-end
"""
