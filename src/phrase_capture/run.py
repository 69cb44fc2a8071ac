from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Sequence
from PIL import Image

from .config import Settings, load_settings
from .utils import ensure_dir, write_jsonl
from .logging import configure_logging, get_logger
from .preprocess import preprocess_pil
from .ocr import OCRError, run_tesseract
from .phrase import extract_phrase
from .confidence import phrase_confidence
from .review import review_phrase
from .evaluate import evaluate_one
from .qr import save_qr

logger = get_logger(__name__)

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tif", ".tiff"}
GT_SUFFIX = ".gt.txt"


def _iter_images(paths: Sequence[str]) -> list[str]:
    out: list[str] = []
    for p in paths:
        if os.path.isdir(p):
            for name in sorted(os.listdir(p)):
                full = os.path.join(p, name)
                if os.path.isfile(full) and os.path.splitext(name)[1].lower() in IMAGE_EXTS:
                    out.append(full)
        else:
            out.append(p)
    return out


def _image_id(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def _read_ground_truth(path: str) -> str | None:
    # photo.png -> photo.gt.txt
    gt_path = os.path.splitext(path)[0] + GT_SUFFIX
    if not os.path.isfile(gt_path):
        return None
    with open(gt_path, encoding="utf-8") as f:
        gt = f.read().strip()
    return gt or None


def process_image(settings: Settings, path: str, qr_dir: str | None = None) -> dict[str, Any]:
    image_id = _image_id(path)

    try:
        with Image.open(path) as img:
            pre = preprocess_pil(
                img,
                min_width=settings.min_width,
                max_width=settings.max_width,
                do_threshold=settings.do_threshold,
                invert_dark=settings.invert_dark,
            )
        ocr = run_tesseract(pre, lang=settings.ocr_lang)
    except (OSError, OCRError) as exc:
        logger.error("image_failed", image_id=image_id, error=str(exc))
        return {
            "image_id": image_id,
            "failed": True,
            "reason": "ocr_failed",
            "error": str(exc),
        }

    # OCR text holds the phrase in cleartext; only dump it when asked to
    if settings.debug_dir:
        ensure_dir(settings.debug_dir)
        with open(os.path.join(settings.debug_dir, f"{image_id}_ocr.txt"), "w", encoding="utf-8") as f:
            f.write(ocr.full_text)

    result = extract_phrase(ocr.full_text, strict_length=settings.strict_length)
    conf_res = phrase_confidence(settings, result.method, result.support, ocr.avg_conf)
    decision = review_phrase(settings, result, conf_res.conf, ocr.avg_conf)

    out: dict[str, Any] = {"image_id": image_id}
    out.update(result.to_dict())
    out.update({
        "avg_ocr_conf": round(ocr.avg_conf, 4),
        "confidence": round(conf_res.conf, 4),
        "needs_review": decision.needs_review,
        "review_reasons": conf_res.reasons + decision.reasons,
    })

    if qr_dir and result.phrase:
        out["qr_path"] = save_qr(
            result.phrase,
            os.path.join(qr_dir, f"{image_id}_qr.png"),
            box_size=settings.qr_box_size,
            border=settings.qr_border,
        )

    logger.info(
        "image_processed",
        image_id=image_id,
        method=result.method,
        support=result.support,
        needs_review=decision.needs_review,
    )
    return out


def run_images(settings: Settings, paths: Sequence[str], output_path: str, qr_dir: str | None = None) -> list[dict[str, Any]]:
    outputs: list[dict[str, Any]] = []
    eval_rows_all: list[dict[str, Any]] = []

    for path in _iter_images(paths):
        out = process_image(settings, path, qr_dir=qr_dir)
        outputs.append(out)

        gt = _read_ground_truth(path)
        if gt is not None:
            r = evaluate_one(out["image_id"], out.get("phrase"), gt)
            eval_rows_all.append({
                "image_id": r.image_id,
                "ok": r.ok,
                "word_acc": round(r.word_acc, 4),
                "score": round(r.score, 4),
                "method": out.get("method"),
                "needs_review": bool(out.get("needs_review", True)),
            })

    write_jsonl(output_path, outputs)

    if eval_rows_all:
        eval_path = os.path.join(os.path.dirname(output_path) or ".", "eval_rows.jsonl")
        write_jsonl(eval_path, eval_rows_all)

        ok_count = sum(1 for r in eval_rows_all if r["ok"])
        total = len(eval_rows_all)
        word_acc = sum(r["word_acc"] for r in eval_rows_all) / total
        reviewed = sum(1 for r in eval_rows_all if r["needs_review"])
        print(f"[EVAL] rows={total} ok={ok_count} acc={ok_count/total:.3f} word_acc={word_acc:.3f} review_rate={reviewed/total:.3f}")

    return outputs


def run_text(settings: Settings, text: str) -> int:
    result = extract_phrase(text, strict_length=settings.strict_length)
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 1 if result.failed else 0


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="phrase-capture", description="Extract a numbered 12-word phrase from images or OCR text.")
    sub = ap.add_subparsers(dest="command", required=True)

    ap_img = sub.add_parser("images", help="OCR image files (or directories of images) and extract phrases")
    ap_img.add_argument("paths", nargs="+", help="Image files or directories")
    ap_img.add_argument("--output", default=None, help="JSONL output path (default: $OUTPUT_PATH)")
    ap_img.add_argument("--qr-dir", default=None, help="Write a QR code PNG per extracted phrase here")

    ap_txt = sub.add_parser("text", help="Extract a phrase from raw OCR text")
    ap_txt.add_argument("file", nargs="?", default="-", help="Text file, or - for stdin")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    if args.command == "text":
        if args.file == "-":
            text = sys.stdin.read()
        else:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        return run_text(settings, text)

    run_images(settings, args.paths, args.output or settings.output_path, qr_dir=args.qr_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
