"""
db/errors.py
------------
Exceptions raised by the database layer.
"""


class QueryExecutionError(Exception):
    """
    A SQL statement failed to execute.

    The underlying psycopg2 error is always chained as ``__cause__``.

    Attributes:
        operation: Name of the data-access operation that failed
            (e.g. ``"get_all_properties"``).
    """

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
