"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Settings store ---
AUTOLINKER_SETTINGS_FILE: str = os.getenv("AUTOLINKER_SETTINGS_FILE", "data.json")

# --- Rendering ---
HTML_PARSER: str = os.getenv("HTML_PARSER", "html.parser")

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
