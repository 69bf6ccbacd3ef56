"""Transport, errors and logging shared by the service modules."""
