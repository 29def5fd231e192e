"""Bot API send-method names.

WHY: Method names appear in request URLs. An enum keeps them in one place
and stops typos from turning into 404s.

HOW: Inherits from str so members drop straight into URLs and JSON.
"""

from __future__ import annotations

import enum


class MessageType(str, enum.Enum):
    """Bot API methods that send something to a chat."""

    TEXT = "sendMessage"
    PHOTO = "sendPhoto"
    AUDIO = "sendAudio"
    DOCUMENT = "sendDocument"
    VIDEO = "sendVideo"
    ANIMATION = "sendAnimation"
    VOICE = "sendVoice"
    # Rounded MPEG4 videos, up to 1 minute long
    VIDEO_NOTE = "sendVideoNote"
    # Photos, audios, videos and documents sent as an album
    MEDIA_GROUP = "sendMediaGroup"
    LOCATION = "sendLocation"
    VENUE = "sendVenue"
    CONTACT = "sendContact"
    POLL = "sendPoll"
    DICE = "sendDice"
    CHAT_ACTION = "sendChatAction"
