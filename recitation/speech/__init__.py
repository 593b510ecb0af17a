"""Speech service integration (Sarvam TTS/STT) and audio caching."""
from .audio_cache import AudioCache
from .sarvam import SarvamClient, SarvamError, SarvamKeyMissingError, TranscriptionResult

__all__ = ["AudioCache", "SarvamClient", "SarvamError", "SarvamKeyMissingError", "TranscriptionResult"]
