"""
RecipeHub server configuration.

Every value comes from the environment; main.py loads a .env file first.
Override any of them there, e.g.:
  RECIPEHUB_PORT=8080
  RECIPEHUB_CORS_ORIGINS=http://localhost:5173,https://recipehub.example.com
"""

import os

HOST = os.environ.get("RECIPEHUB_HOST", "127.0.0.1")
PORT = int(os.environ.get("RECIPEHUB_PORT", "3030"))

LOG_LEVEL = os.environ.get("RECIPEHUB_LOG_LEVEL", "INFO").upper()

# "*" allows any origin; auth rides in X-Authorization, never in cookies
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("RECIPEHUB_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOAD_SEED = os.environ.get("RECIPEHUB_SEED", "1").strip().lower() not in (
    "0", "false", "no", "off",
)
