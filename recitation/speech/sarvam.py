"""Client for the Sarvam AI text-to-speech and speech-to-text APIs."""
from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..config import (
    AUDIO_CACHE_MAX_ENTRIES,
    SARVAM_API_BASE,
    SARVAM_API_KEY_ENV,
    SARVAM_TIMEOUT,
    STT_LANGUAGE_CODE,
    STT_MODEL,
    TTS_LANGUAGE_CODE,
    TTS_MODEL,
    TTS_PACE,
    TTS_PITCH,
    TTS_SPEAKER,
)
from .audio_cache import AudioCache, make_cache_key


class SarvamError(RuntimeError):
    """Raised when a Sarvam request fails or returns an unusable payload."""


class SarvamKeyMissingError(SarvamError):
    """Raised when no API key is configured."""


@dataclass(frozen=True)
class TranscriptionResult:
    transcript: str
    language_code: str


class SarvamClient:
    """Thin wrapper around the Sarvam REST endpoints.

    The API key comes from the constructor or, when omitted, from the
    ``SARVAM_API_KEY`` environment variable at request time. Generated audio
    is kept in the client's own ``AudioCache``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = SARVAM_API_BASE,
        timeout: float = SARVAM_TIMEOUT,
        audio_cache: Optional[AudioCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if audio_cache is None:
            max_entries = AUDIO_CACHE_MAX_ENTRIES if AUDIO_CACHE_MAX_ENTRIES > 0 else None
            audio_cache = AudioCache(max_entries)
        self.audio_cache = audio_cache
        self.session = session or requests.Session()

    def get_api_key(self) -> str:
        key = self._api_key or os.getenv(SARVAM_API_KEY_ENV)
        if not key:
            raise SarvamKeyMissingError(
                "Sarvam API key not configured. Set the SARVAM_API_KEY environment variable."
            )
        return key

    def set_api_key(self, key: str) -> None:
        self._api_key = key

    def clear_api_key(self) -> None:
        self._api_key = None

    def _post(self, path: str, kind: str, **kwargs: Any) -> Dict[str, Any]:
        headers = kwargs.pop("headers", {})
        headers["api-subscription-key"] = self.get_api_key()
        try:
            response = self.session.post(
                f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.RequestException as e:
            raise SarvamError(f"Sarvam {kind} request failed: {e}") from e

        if not response.ok:
            raise SarvamError(f"Sarvam {kind} failed ({response.status_code}): {response.text}")

        try:
            return response.json()
        except ValueError as e:
            raise SarvamError(f"Sarvam {kind} returned invalid JSON") from e

    def text_to_speech(
        self,
        text: str,
        speaker: str = TTS_SPEAKER,
        pace: float = TTS_PACE,
        pitch: float = TTS_PITCH,
        model: str = TTS_MODEL,
    ) -> str:
        """Synthesize ``text`` and return base64-encoded WAV audio.

        Cached audio is returned without contacting the service.
        """
        cache_key = make_cache_key(text, pace, speaker, pitch, model)
        cached = self.audio_cache.get(cache_key)
        if cached:
            return cached

        data = self._post(
            "/text-to-speech",
            "TTS",
            json={
                "inputs": [text],
                "target_language_code": TTS_LANGUAGE_CODE,
                "speaker": speaker,
                "pace": pace,
                "pitch": pitch,
                "model": model,
            },
        )

        audios = data.get("audios") or []
        audio_base64 = audios[0] if audios else None
        if not audio_base64:
            raise SarvamError("No audio returned from Sarvam TTS")

        self.audio_cache.put(cache_key, audio_base64)
        return audio_base64

    def speech_to_text(
        self,
        audio_path: str,
        language: str = STT_LANGUAGE_CODE,
        model: str = STT_MODEL,
    ) -> TranscriptionResult:
        """Transcribe a recorded WAV file.

        Args:
            audio_path: Path to the recording
            language: BCP-47 language code sent to the service
            model: Sarvam STT model name

        Returns:
            TranscriptionResult; an absent transcript comes back as ""
        """
        if not os.path.exists(audio_path):
            raise FileNotFoundError(f"Audio file not found: {audio_path}")

        with open(audio_path, "rb") as f:
            data = self._post(
                "/speech-to-text",
                "STT",
                files={"file": ("recording.wav", f, "audio/wav")},
                data={"language_code": language, "model": model},
            )

        transcript = data.get("transcript")
        if transcript is None:
            warnings.warn("Sarvam STT response had no transcript; treating as silence")
            transcript = ""
        return TranscriptionResult(
            transcript=transcript,
            language_code=data.get("language_code") or "unknown",
        )

    def clear_audio_cache(self) -> None:
        self.audio_cache.clear()
