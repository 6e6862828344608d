"""
Interview Feedback Configuration

Centralized configuration for the feedback service.
Values are read from the environment (and a local .env file) at import time;
modify these settings to customize behavior.
"""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


# ============================================================================
# Gemini Configuration
# ============================================================================

GEMINI_CONFIG = {
    # API key (None = let google-genai pick it up from the environment)
    "api_key": os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY"),

    # Model used to generate structured interview feedback
    "model": os.getenv("GEMINI_FEEDBACK_MODEL", "gemini-2.0-flash-001"),

    # Sampling temperature for feedback generation
    "temperature": float(os.getenv("GEMINI_FEEDBACK_TEMPERATURE", "0.2")),
}

# ============================================================================
# Firestore Configuration
# ============================================================================

FIRESTORE_CONFIG = {
    # Google Cloud project (None = resolved from application default credentials)
    "project": os.getenv("FIRESTORE_PROJECT") or os.getenv("GOOGLE_CLOUD_PROJECT"),

    # Firestore database id
    "database": os.getenv("FIRESTORE_DATABASE", "(default)"),

    # Collection names
    "interviews_collection": os.getenv("INTERVIEWS_COLLECTION", "interviews"),
    "feedback_collection": os.getenv("FEEDBACK_COLLECTION", "feedback"),
}

# ============================================================================
# Reader Configuration
# ============================================================================

READER_CONFIG = {
    # Default page size for the community (latest interviews) listing
    "latest_interviews_limit": 20,
}

# ============================================================================
# Logging Configuration
# ============================================================================

LOGGING_CONFIG = {
    # Log level: "DEBUG", "INFO", "WARNING", "ERROR"
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
}

