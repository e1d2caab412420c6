"""
Domain errors raised by the generation services
"""


class ValidationError(ValueError):
    """Raised when a request violates a precondition (e.g. an empty topic)"""

    def __init__(self, message: str, field: str = "topic") -> None:
        super().__init__(message)
        self.message = message
        self.field = field


def require_topic(topic: str) -> str:
    """Return the topic unchanged, or raise ValidationError if it is blank"""
    if topic is None or not topic.strip():
        raise ValidationError("Topic must not be empty", field="topic")
    return topic
