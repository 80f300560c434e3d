"""
Application Constants

Fixed values shared across layers.
"""

# Recognized audio extensions, lowercase and without the leading dot.
AUDIO_EXTENSIONS = frozenset({
    "mp3",
    "wav",
    "ogg",
    "flac",
    "aac",
    "m4a",
    "wma",
    "aiff",
    "ape",
    "opus",
    "webm",
})

APP_NAME = "MusicDeck"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "musicdeck.log"
