from __future__ import annotations

import os
from typing import Any, Tuple

import gradio as gr
import pandas as pd
from PIL import Image

from .config import load_settings
from .logging import configure_logging, get_logger
from .preprocess import preprocess_pil
from .ocr import OCRError, run_tesseract
from .phrase import extract_phrase
from .confidence import phrase_confidence
from .review import review_phrase
from .qr import encode_qr

logger = get_logger(__name__)

UPLOAD_HINT = "Upload or capture an image of a numbered word list."
NOT_FOUND_MSG = (
    "No 12-word seed phrase detected. Please ensure the image contains a numbered "
    "seed phrase (1. word 2. word ... 12. word) and the text is clear and readable."
)
OCR_FAILED_MSG = "Failed to process image. Please try again."

CANDIDATE_COLUMNS = ["position", "word"]


def _empty_table() -> pd.DataFrame:
    return pd.DataFrame([], columns=CANDIDATE_COLUMNS)


def run_extraction_ui(img: Image.Image | None) -> Tuple[str, Image.Image | None, pd.DataFrame, str, str]:
    """
    Returns:
      - phrase (string, empty when nothing found)
      - QR code image (or None)
      - candidates table
      - badge markdown
      - raw OCR text
    """
    if img is None:
        return "", None, _empty_table(), f"**{UPLOAD_HINT}**", ""

    settings = load_settings()

    pre = preprocess_pil(
        img,
        min_width=settings.min_width,
        max_width=settings.max_width,
        do_threshold=settings.do_threshold,
        invert_dark=settings.invert_dark,
    )
    try:
        ocr = run_tesseract(pre, lang=settings.ocr_lang)
    except OCRError as exc:
        logger.error("ui_ocr_failed", error=str(exc))
        return "", None, _empty_table(), f"### ⚠️ {OCR_FAILED_MSG}", ""

    result = extract_phrase(ocr.full_text, strict_length=settings.strict_length)
    conf_res = phrase_confidence(settings, result.method, result.support, ocr.avg_conf)
    decision = review_phrase(settings, result, conf_res.conf, ocr.avg_conf)

    # --- Table output ---
    rows: list[dict[str, Any]] = [
        {"position": pos, "word": word} for pos, word in sorted(result.candidates.items())
    ]
    df = pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)

    if result.failed:
        return "", None, df, f"### ⚠️ {NOT_FOUND_MSG}", ocr.full_text

    qr_img = encode_qr(result.phrase, box_size=settings.qr_box_size, border=settings.qr_border)

    reasons = conf_res.reasons + decision.reasons
    badge = f"""
### Phrase check
**needs_review:** `{decision.needs_review}`
**method:** `{result.method}` (strategy: `{result.strategy}`, positions found: `{result.support}`)
**confidence:** `{round(conf_res.conf, 4)}`
**avg_ocr_conf:** `{round(ocr.avg_conf, 4)}`
**reasons:** {", ".join(reasons) if reasons else "—"}
""".strip()

    logger.info("ui_phrase_extracted", method=result.method, support=result.support, needs_review=decision.needs_review)
    return result.phrase, qr_img, df, badge, ocr.full_text


def build_app() -> gr.Blocks:
    with gr.Blocks(title="12Capture") as demo:
        gr.Markdown("# 12Capture")
        gr.Markdown(
            "Upload or photograph a numbered seed phrase → extract the 12 words → copy them or scan the QR code. "
            "Everything runs locally; nothing is stored."
        )

        with gr.Row():
            inp = gr.Image(type="pil", sources=["upload", "webcam", "clipboard"], label="Seed phrase image")

        run_btn = gr.Button("Extract phrase", variant="primary")

        with gr.Row():
            phrase_out = gr.Textbox(label="Extracted seed phrase", interactive=False)
        with gr.Row():
            qr_out = gr.Image(type="pil", label="QR code", interactive=False)
            table_out = gr.Dataframe(label="Numbered words found", interactive=False, wrap=True)
        with gr.Row():
            badge_out = gr.Markdown()
        with gr.Accordion("Raw OCR text", open=False):
            text_out = gr.Textbox(label="OCR output", lines=8, interactive=False)

        run_btn.click(
            fn=run_extraction_ui,
            inputs=[inp],
            outputs=[phrase_out, qr_out, table_out, badge_out, text_out],
        )

    return demo


def main() -> None:
    configure_logging(load_settings().log_level)
    demo = build_app()
    # IMPORTANT for Docker: bind to 0.0.0.0
    server_name = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
    server_port = int(os.getenv("GRADIO_SERVER_PORT", "7860"))
    demo.launch(server_name=server_name, server_port=server_port)


if __name__ == "__main__":
    main()
