"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordNotFoundError(DomainException):
    """No record with the requested id exists in the collection"""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id


class InvalidRecordError(DomainException):
    """Stored or submitted record data is malformed"""

    pass


class StorageError(DomainException):
    """Persistence layer is unavailable or failed to read/write"""

    pass
