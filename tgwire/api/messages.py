"""Message records for Bot API send methods.

WHY: Each send method takes a fixed set of parameters. Declaring them as
dataclasses gives callers autocompletion and lets the body encoder read
wire names and omission markers from one place.

HOW: Every field is declared with wire_field(). Optional parameters are
omit-if-empty so unset values never reach the wire. Each record names
its Bot API method in the METHOD class attribute.

RULES:
- Media fields (photo, document, ...) hold a file_id or URL string; an
  attachment with the same wire name replaces them with an upload
- Media fields are not omit-if-empty: a record without an upload must
  carry the file_id
- reply_markup and entities are composite and travel as embedded JSON in
  multipart bodies
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tgwire.api.methods import MessageType
from tgwire.body import wire_field


# ---------------------------------------------------------------------------
# Nested types
# ---------------------------------------------------------------------------


@dataclass
class MessageEntity:
    """A formatted span inside a message text or caption."""

    type: str = wire_field("type")
    offset: int = wire_field("offset")
    length: int = wire_field("length")
    url: str = wire_field("url", omit_empty=True, default="")


@dataclass
class InlineKeyboardButton:
    """One button of an inline keyboard."""

    text: str = wire_field("text")
    url: str = wire_field("url", omit_empty=True, default="")
    callback_data: str = wire_field("callback_data", omit_empty=True, default="")


@dataclass
class InlineKeyboardMarkup:
    """Inline keyboard shown under a message, as rows of buttons."""

    inline_keyboard: list[list[InlineKeyboardButton]] = wire_field(
        "inline_keyboard", default_factory=list
    )


# ---------------------------------------------------------------------------
# Send method payloads
# ---------------------------------------------------------------------------


@dataclass
class TextMessage:
    METHOD: ClassVar[MessageType] = MessageType.TEXT

    chat_id: int | str = wire_field("chat_id")
    text: str = wire_field("text")
    parse_mode: str = wire_field("parse_mode", omit_empty=True, default="")
    entities: list[MessageEntity] = wire_field("entities", omit_empty=True, default_factory=list)
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)
    reply_to_message_id: int = wire_field("reply_to_message_id", omit_empty=True, default=0)
    reply_markup: InlineKeyboardMarkup | None = wire_field(
        "reply_markup", omit_empty=True, default=None
    )


@dataclass
class PhotoMessage:
    METHOD: ClassVar[MessageType] = MessageType.PHOTO

    chat_id: int | str = wire_field("chat_id")
    photo: str = wire_field("photo", default="")
    caption: str = wire_field("caption", omit_empty=True, default="")
    parse_mode: str = wire_field("parse_mode", omit_empty=True, default="")
    caption_entities: list[MessageEntity] = wire_field(
        "caption_entities", omit_empty=True, default_factory=list
    )
    has_spoiler: bool = wire_field("has_spoiler", omit_empty=True, default=False)
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)
    reply_markup: InlineKeyboardMarkup | None = wire_field(
        "reply_markup", omit_empty=True, default=None
    )


@dataclass
class DocumentMessage:
    METHOD: ClassVar[MessageType] = MessageType.DOCUMENT

    chat_id: int | str = wire_field("chat_id")
    document: str = wire_field("document", default="")
    thumbnail: str = wire_field("thumbnail", omit_empty=True, default="")
    caption: str = wire_field("caption", omit_empty=True, default="")
    parse_mode: str = wire_field("parse_mode", omit_empty=True, default="")
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)
    reply_markup: InlineKeyboardMarkup | None = wire_field(
        "reply_markup", omit_empty=True, default=None
    )


@dataclass
class AudioMessage:
    METHOD: ClassVar[MessageType] = MessageType.AUDIO

    chat_id: int | str = wire_field("chat_id")
    audio: str = wire_field("audio", default="")
    caption: str = wire_field("caption", omit_empty=True, default="")
    duration: int = wire_field("duration", omit_empty=True, default=0)
    performer: str = wire_field("performer", omit_empty=True, default="")
    title: str = wire_field("title", omit_empty=True, default="")
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)


@dataclass
class VideoMessage:
    METHOD: ClassVar[MessageType] = MessageType.VIDEO

    chat_id: int | str = wire_field("chat_id")
    video: str = wire_field("video", default="")
    duration: int = wire_field("duration", omit_empty=True, default=0)
    width: int = wire_field("width", omit_empty=True, default=0)
    height: int = wire_field("height", omit_empty=True, default=0)
    caption: str = wire_field("caption", omit_empty=True, default="")
    supports_streaming: bool = wire_field("supports_streaming", omit_empty=True, default=False)
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)


@dataclass
class LocationMessage:
    METHOD: ClassVar[MessageType] = MessageType.LOCATION

    chat_id: int | str = wire_field("chat_id")
    latitude: float = wire_field("latitude")
    longitude: float = wire_field("longitude")
    horizontal_accuracy: float = wire_field("horizontal_accuracy", omit_empty=True, default=0.0)
    live_period: int = wire_field("live_period", omit_empty=True, default=0)
    disable_notification: bool = wire_field("disable_notification", omit_empty=True, default=False)


@dataclass
class ChatActionMessage:
    """Tell the user something is happening on the bot's side ("typing", ...)."""

    METHOD: ClassVar[MessageType] = MessageType.CHAT_ACTION

    chat_id: int | str = wire_field("chat_id")
    action: str = wire_field("action")
