"""Custom exceptions for the application."""


class ClientValidationError(Exception):
    """Raised when raw client input fails one or more validation rules."""

    def __init__(self, errors: dict[str, list[str]]):
        """
        Initialize the exception.

        Args:
            errors: Mapping from field name to the messages of every failed rule
        """
        super().__init__(f"Validation failed for fields: {', '.join(sorted(errors))}")
        self.errors = errors


class NoRecordsFound(Exception):
    """Raised when an operation needs stored records and there are none."""

    def __init__(self, entity_name: str):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that has no stored records
        """
        super().__init__(f"No {entity_name} records found")
        self.entity_name = entity_name
