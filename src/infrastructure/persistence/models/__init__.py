from src.infrastructure.persistence.models.message import MessageModel

__all__ = [
    # Models
    "MessageModel",
]
