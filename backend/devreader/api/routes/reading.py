"""Endpoints that run the HTML segmentation helpers on client supplied HTML."""

from fastapi import APIRouter

from devreader.clickable_blocks import mark_clickable_blocks
from devreader.html_text import extract_text_from_html
from devreader.schemas.reading import (
    AnnotateRequest,
    AnnotateResponse,
    BlockSchema,
    HtmlRequest,
    SentenceListResponse,
    SentenceSchema,
    TextResponse,
)
from devreader.sentence_splitter import segment_sentences

router = APIRouter(prefix="/reading", tags=["reading"])


@router.post("/text", response_model=TextResponse)
def extract_text(payload: HtmlRequest) -> TextResponse:
    return TextResponse(text=extract_text_from_html(payload.html))


@router.post("/sentences", response_model=SentenceListResponse)
def split_sentences(payload: HtmlRequest) -> SentenceListResponse:
    sentences = [
        SentenceSchema(id=str(sentence.position), text=sentence.text, position=sentence.position)
        for sentence in segment_sentences(payload.html)
    ]
    return SentenceListResponse(sentences=sentences)


@router.post("/annotate", response_model=AnnotateResponse)
def annotate(payload: AnnotateRequest) -> AnnotateResponse:
    annotated = mark_clickable_blocks(payload.html, payload.selected)
    return AnnotateResponse(
        html=annotated.html,
        blocks=[BlockSchema(kind=block.kind, text=block.text, selected=block.selected) for block in annotated.blocks],
    )
