"""Transport seam between the command router and a WXWork group chat."""

from __future__ import annotations

import abc
from typing import Optional


class IChatAdapter(abc.ABC):
    """Delivers robot replies to WXWork chats and feeds incoming messages to the router.

    A chat is addressed by the ``chat_id`` WXWork puts in every callback; the
    router never inspects it beyond passing it back.
    """

    @abc.abstractmethod
    async def send_message(self, chat_id: str, text: str) -> Optional[str]:
        """Post ``text`` into the chat identified by ``chat_id``.

        Returns the id WXWork assigns to the sent message, or None when the
        robot webhook does not report one.
        """

    @abc.abstractmethod
    async def start(self) -> None:
        """Start receiving robot callbacks and forwarding them to the router."""

    @abc.abstractmethod
    async def stop(self) -> None:
        """Stop receiving callbacks."""
