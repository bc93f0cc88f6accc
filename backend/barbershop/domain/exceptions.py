"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidStatusTransitionError(Exception):
    """Raised when an appointment cannot move from its current status."""

    def __init__(self, appointment_id: str, current: str, target: str):
        self.appointment_id = appointment_id
        self.current = current
        self.target = target
        super().__init__(
            f"Appointment '{appointment_id}' cannot move from '{current}' to '{target}'"
        )
