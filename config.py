import os
from dotenv import load_dotenv

from eligibility.logic.constants import DEFAULT_ENGINE_VERSION

load_dotenv()

ENGINE_VERSION = os.getenv("ELIGIBILITY_ENGINE_VERSION", DEFAULT_ENGINE_VERSION)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
