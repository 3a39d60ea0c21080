"""Domain layer for worklog application.

Services are imported from their modules directly; this package does not
re-export them, so the database layer can import entities without pulling
the services in.
"""
