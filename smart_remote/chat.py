"""Chat rooms coordinated through a mediator.

Users never talk to each other directly. They join rooms and send messages
through a :class:`ChatRoomMediator`, which fans room messages out to the
other members and hands private messages straight to the recipient.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

LOGGER = logging.getLogger(__name__)

SYSTEM_SENDER = "SYSTEM"


class ChatError(RuntimeError):
    """Base class for mediator errors."""


class RoomNotFoundError(ChatError):
    def __init__(self, room: str) -> None:
        super().__init__(f"Room {room} not found")
        self.room = room


class NotRoomMemberError(ChatError):
    def __init__(self, user_name: str, room: str) -> None:
        super().__init__(f"{user_name} is not a member of room {room}")
        self.user_name = user_name
        self.room = room


class RecipientNotFoundError(ChatError):
    def __init__(self) -> None:
        super().__init__("Recipient not found")


@dataclass(frozen=True, slots=True)
class ChatMessage:
    sender: str
    text: str
    room: Optional[str] = None

    @property
    def private(self) -> bool:
        return self.room is None


class Mediator(Protocol):
    def register(self, user: "User", room: str) -> None: ...

    def unregister(self, user: "User", room: str) -> None: ...

    def send_room_message(self, room: str, sender: "User", text: str) -> None: ...

    def send_private_message(
        self, sender: "User", recipient: Optional["User"], text: str
    ) -> None: ...

    def list_rooms(self) -> List[str]: ...


class User:
    def __init__(self, name: str, mediator: Mediator) -> None:
        self.name = name
        self._mediator = mediator
        self.inbox: List[ChatMessage] = []

    def join(self, room: str) -> None:
        self._mediator.register(self, room)

    def leave(self, room: str) -> None:
        self._mediator.unregister(self, room)

    def send_to_room(self, room: str, text: str) -> None:
        self._mediator.send_room_message(room, self, text)

    def send_private(self, recipient: Optional["User"], text: str) -> None:
        self._mediator.send_private_message(self, recipient, text)

    def receive_room(self, room: str, sender: str, text: str) -> None:
        self.inbox.append(ChatMessage(sender=sender, text=text, room=room))
        LOGGER.info("[%s] %s -> %s: %s", room, sender, self.name, text)

    def receive_private(self, sender: str, text: str) -> None:
        self.inbox.append(ChatMessage(sender=sender, text=text))
        LOGGER.info("[Private] %s -> %s: %s", sender, self.name, text)

    def __repr__(self) -> str:
        return f"User({self.name!r})"


class ChatRoomMediator:
    """Routes messages between users grouped into named rooms.

    Rooms are created on first join and are kept after the last member
    leaves. Members are delivered to in join order.
    """

    def __init__(self) -> None:
        # dict preserves join order; values unused
        self._rooms: Dict[str, Dict[User, None]] = {}

    def register(self, user: User, room: str) -> None:
        members = self._rooms.setdefault(room, {})
        if user in members:
            return
        members[user] = None
        self._broadcast_system(room, f"{user.name} joined {room}")

    def unregister(self, user: User, room: str) -> None:
        members = self._rooms.get(room)
        if members is None or user not in members:
            return
        del members[user]
        self._broadcast_system(room, f"{user.name} left {room}")

    def send_room_message(self, room: str, sender: User, text: str) -> None:
        """Deliver ``text`` to every member of ``room`` except the sender.

        Raises:
            RoomNotFoundError: If the room was never created.
            NotRoomMemberError: If the sender is not in the room.
        """
        members = self._rooms.get(room)
        if members is None:
            raise RoomNotFoundError(room)
        if sender not in members:
            raise NotRoomMemberError(sender.name, room)

        for member in list(members):
            if member is not sender:
                member.receive_room(room, sender.name, text)

    def send_private_message(
        self, sender: User, recipient: Optional[User], text: str
    ) -> None:
        if recipient is None:
            raise RecipientNotFoundError()
        recipient.receive_private(sender.name, text)

    def list_rooms(self) -> List[str]:
        return list(self._rooms)

    def members(self, room: str) -> List[User]:
        return list(self._rooms.get(room, {}))

    def _broadcast_system(self, room: str, text: str) -> None:
        for member in list(self._rooms.get(room, {})):
            member.receive_room(room, SYSTEM_SENDER, text)
