# /school_admin/config.py

"""
Process-wide settings, read once from the environment.

A local `.env` file is loaded first so development machines do not need to
export anything by hand.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./school_admin.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# When set, logs are also written to a rotating file at this path.
LOG_FILE = os.getenv("LOG_FILE")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
