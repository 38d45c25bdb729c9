"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool and raw statement execution.
This layer is the lowest in the architecture and has no dependencies on other layers.
The schema (users, properties, reservations, property_reviews) is expected to exist.
"""
