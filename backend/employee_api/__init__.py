"""
Employee Directory — Application Package
=========================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      EmployeeService (Domain)       │  ← lookups, uniqueness signal
    ├─────────────────────────────────────┤
    │    EmployeeRepository (Data)        │  ← SQLAlchemy queries
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

Each layer receives the one below it through its constructor; see
employee_api.dependencies for the request-time wiring.
"""

__version__ = "1.0.0"
