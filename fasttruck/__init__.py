"""
Fast Truck - delivery job marketplace

Clients post delivery jobs, freelancers browse and apply to them.

Structure:
- pincode/: Pincode-to-address resolution (lookup client + resolver widget)
- marketplace/: Injected backend capability (auth + job/application records)
- forms/, dashboards/: Client and freelancer view-models built on the backend
- api/, auth/: FastAPI routes
- db/, models/: SQLAlchemy persistence used by the SQL backend
"""

__version__ = '0.1.0'
