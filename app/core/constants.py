"""Application constants."""

import re

# Registration rules
MIN_PASSWORD_LENGTH = 6
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Authorization header scheme accepted by the access guard
BEARER_SCHEME = "Bearer"

# Response messages
REGISTER_SUCCESS_MESSAGE = "User created successfully"
LOGIN_SUCCESS_MESSAGE = "Login successful"
PROFILE_MESSAGE = "Access granted"
REGISTER_REQUIRED_MESSAGE = "Name, email and password are required"
LOGIN_REQUIRED_MESSAGE = "Email and password are required"
