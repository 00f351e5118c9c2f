# Routes package init
"""
Employee Directory — API Routes Package
=========================================

Route Inventory:
    - employees.py:  GET  /api/employees                  (list, insertion order)
                     POST /api/employees                  (create)
                     GET  /api/employees/{id}             (by id)
                     GET  /api/employees/by-name/{name}   (by name, first match)
    - health.py:     GET  /health                         (database probe)

Routes stay thin: they translate HTTP to EmployeeService calls and map
absent results and duplicate signals to status codes.
"""
