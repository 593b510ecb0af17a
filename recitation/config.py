"""Configuration constants for recitation scoring and the Sarvam speech services."""
from __future__ import annotations

import os

# Score given when both the reference and the transcript normalize to nothing
EMPTY_MATCH_SCORE = 100

# Feedback message bands (minimum score for each band)
BAND_EXCELLENT = 80
BAND_GOOD = 60
BAND_KEEP_PRACTICING = 40

# Colour tiers used by clients when rendering the score circle
TIER_HIGH = 80
TIER_MEDIUM = 50

# Sarvam AI service
SARVAM_API_BASE = os.getenv("SARVAM_API_BASE", "https://api.sarvam.ai")
SARVAM_API_KEY_ENV = "SARVAM_API_KEY"
SARVAM_TIMEOUT = float(os.getenv("SARVAM_TIMEOUT", "30"))  # seconds

# hi-IN is the closest supported language for Sanskrit Devanagari text
TTS_LANGUAGE_CODE = "hi-IN"
TTS_SPEAKER = "anushka"
TTS_PACE = 0.85
TTS_PITCH = 0.0
TTS_MODEL = "bulbul:v2"

STT_LANGUAGE_CODE = "hi-IN"
STT_MODEL = "saarika:v2"

# Generated audio kept in memory; 0 or less means unbounded
AUDIO_CACHE_MAX_ENTRIES = int(os.getenv("AUDIO_CACHE_MAX_ENTRIES", "128"))

# Where uploaded recordings are written before transcription
UPLOAD_DIR = os.getenv("RECITATION_UPLOAD_DIR", os.path.join(os.getcwd(), "uploads"))
