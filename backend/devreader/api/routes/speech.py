"""Text-to-speech endpoint for the selected paragraph."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from devreader.api.deps import get_speech_client
from devreader.schemas.system import SpeechRequest
from devreader.services.speech_client import SpeechClient, SpeechError

logger = logging.getLogger("devreader.backend.speech")

router = APIRouter(tags=["speech"])


@router.post("/tts", response_class=Response)
async def text_to_speech(
    payload: SpeechRequest,
    client: SpeechClient = Depends(get_speech_client),
) -> Response:
    text = payload.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Text is required")
    try:
        audio = await client.synthesize(text)
    except SpeechError as exc:
        logger.error("Error generating audio: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to generate audio") from exc
    return Response(content=audio.content, media_type=audio.media_type)
