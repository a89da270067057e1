# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "Telephone Pictionary"
APP_SLUG = "telephone-pictionary"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

SAVE_FILE_EXTENSION = ".tpi"
SAVE_FILE_FILTER = "Telephone Pictionary (*.tpi)"
DEFAULT_IMAGE_EXTENSIONS = (".png", ".jpg")

ENTRY_RESOURCE_PREFIX = "entry/"

REVIEW_BUTTON_LABELS = {
    False: "End Game",
    True: "Go Back",
}
