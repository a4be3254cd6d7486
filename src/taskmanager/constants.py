# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "taskmanager"
APP_TITLE = "Task Manager"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_DATA_FILE = "projects.json"
DATA_FILE_ENV_VAR = "TASKMANAGER_DATA_FILE"

AUTOSAVE_INTERVAL_SECONDS = 15
DATA_FORMAT_VERSION = 1

NAME_REQUIRED_MESSAGE = "Name is required"
