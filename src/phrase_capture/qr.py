from __future__ import annotations
import os
import qrcode
from qrcode.constants import ERROR_CORRECT_M
from PIL import Image
from .utils import ensure_dir

def encode_qr(text: str, box_size: int = 8, border: int = 2) -> Image.Image:
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, box_size=box_size, border=border)
    qr.add_data(text)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    # qrcode wraps the PIL image; hand callers a plain one
    return img.get_image().convert("RGB")

def save_qr(text: str, path: str, box_size: int = 8, border: int = 2) -> str:
    ensure_dir(os.path.dirname(path) or ".")
    encode_qr(text, box_size=box_size, border=border).save(path)
    return path
