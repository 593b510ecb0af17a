import os
import sys
import traceback
from flask import Flask, request, jsonify

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from recitation.config import STT_LANGUAGE_CODE, TTS_PACE, TTS_PITCH, TTS_SPEAKER
from recitation.progress import ScoreBook
from recitation.scorer import build_practice_report, score_pronunciation
from recitation.speech import SarvamClient, SarvamError, SarvamKeyMissingError
from api.file_utils import get_temp_filepath, remove_quietly

app = Flask(__name__)

SCORE_BOOK = ScoreBook()
SARVAM = SarvamClient()


def _speech_error_response(e):
    """Map a Sarvam failure to a JSON error response."""
    if isinstance(e, SarvamKeyMissingError):
        return jsonify({"error": str(e)}), 503
    return jsonify({"error": str(e)}), 502


def _score_and_record(expected, actual, shloka_id=None):
    result = score_pronunciation(expected, actual)
    if shloka_id:
        SCORE_BOOK.add_score(shloka_id, result.score)
    report = build_practice_report(result).to_dict()
    if shloka_id:
        report["shloka_id"] = shloka_id
        report["best_score"] = SCORE_BOOK.best_score(shloka_id)
    return report

# ============================================================================
# ROUTES - PRONUNCIATION
# ============================================================================
@app.route('/api/pronunciation/score', methods=['POST'])
def score():
    """Score an already-transcribed attempt against the expected transliteration."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'expected' not in data:
        return jsonify({"error": "No expected text provided"}), 400

    expected = data.get('expected')
    actual = data.get('actual', '')
    shloka_id = data.get('shloka_id')
    if not isinstance(expected, str) or not isinstance(actual, str):
        return jsonify({"error": "'expected' and 'actual' must be strings"}), 400
    if shloka_id is not None and not isinstance(shloka_id, str):
        return jsonify({"error": "'shloka_id' must be a string"}), 400

    return jsonify(_score_and_record(expected, actual, shloka_id))


@app.route('/api/pronunciation/check', methods=['POST'])
def check():
    """Transcribe an uploaded recording, then score it."""
    if 'audio' not in request.files:
        return jsonify({"error": "No audio file"}), 400

    expected = request.form.get('expected')
    if expected is None:
        return jsonify({"error": "No expected text provided"}), 400
    shloka_id = request.form.get('shloka_id') or None
    language = request.form.get('language', STT_LANGUAGE_CODE)

    temp_path = get_temp_filepath('recording', 'wav')
    try:
        request.files['audio'].save(temp_path)
        transcription = SARVAM.speech_to_text(temp_path, language=language)
        report = _score_and_record(expected, transcription.transcript, shloka_id)
        report["transcript"] = transcription.transcript
        report["language_code"] = transcription.language_code
        return jsonify(report)
    except SarvamError as e:
        print(f"Transcription failed: {e}")
        return _speech_error_response(e)
    except Exception as e:
        traceback.print_exc()
        return jsonify({"error": str(e)}), 500
    finally:
        remove_quietly(temp_path)


@app.route('/api/pronunciation/best/<shloka_id>', methods=['GET'])
def best_score(shloka_id):
    """Best recorded score and all attempts for a shloka."""
    return jsonify({
        "shloka_id": shloka_id,
        "best_score": SCORE_BOOK.best_score(shloka_id),
        "attempts": list(SCORE_BOOK.scores(shloka_id)),
    })

# ============================================================================
# ROUTES - REFERENCE AUDIO
# ============================================================================
@app.route('/api/tts', methods=['POST'])
def tts():
    """Synthesize reference audio for a shloka."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('text'), str) or not data['text']:
        return jsonify({"error": "No text provided"}), 400

    try:
        pace = float(data.get('pace', TTS_PACE))
        pitch = float(data.get('pitch', TTS_PITCH))
    except (TypeError, ValueError):
        return jsonify({"error": "'pace' and 'pitch' must be numbers"}), 400

    try:
        audio = SARVAM.text_to_speech(
            data['text'],
            speaker=data.get('speaker', TTS_SPEAKER),
            pace=pace,
            pitch=pitch,
        )
    except SarvamError as e:
        print(f"TTS failed: {e}")
        return _speech_error_response(e)

    return jsonify({"audio_base64": audio})


@app.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


if __name__ == '__main__':
    port = int(os.getenv("PORT", "5000"))
    print(f"Starting recitation API on port {port}")
    app.run(host='0.0.0.0', port=port, debug=False)
