"""
Errors raised by the repository layer.

Translated to HTTP responses by the exception handlers in app.main; nothing
below the API layer knows about status codes.
"""


class NotFoundError(LookupError):
    """No row with the requested id."""

    def __init__(self, entity: str, id: int) -> None:
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} with id {id} not found")


class StorageError(RuntimeError):
    """
    Any failure coming from the store: connection loss, pool timeout,
    constraint violation, bad SQL. Not differentiated further.
    """

    pass
