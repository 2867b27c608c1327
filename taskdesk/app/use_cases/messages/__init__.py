"""
Message Use Cases
"""

from .dtos import MessageInfo, SendMessageCommand
from .list_messages_use_case import ListMessagesUseCase
from .mark_message_read_use_case import MarkMessageReadUseCase
from .send_message_use_case import SendMessageUseCase

__all__ = [
    "ListMessagesUseCase",
    "SendMessageUseCase",
    "MarkMessageReadUseCase",
    "SendMessageCommand",
    "MessageInfo",
]
