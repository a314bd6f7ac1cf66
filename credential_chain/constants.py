import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Session name purposes
ASSUME_ROLE_SESSION_PURPOSE = "assume-role-from-profile"
WEB_IDENTITY_SESSION_PURPOSE = "web-identity-token-profile"

# STS limits RoleSessionName to 64 characters
MAX_SESSION_NAME_LENGTH = 64

# Environment credential variables
ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_SECRET_KEY_LEGACY = "AWS_SECRET_KEY"
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"

# Named provider sources
ENVIRONMENT_SOURCE_NAME = "Environment"
