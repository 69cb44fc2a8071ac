from __future__ import annotations
import numpy as np
import cv2
from PIL import Image

def preprocess_pil(
    img: Image.Image,
    min_width: int = 1000,
    max_width: int = 2000,
    do_threshold: bool = False,
    invert_dark: bool = True,
) -> Image.Image:
    arr = np.array(img.convert("RGB"))
    bgr = cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)

    # Phone screenshots are often too small for tesseract, photos too large
    h, w = bgr.shape[:2]
    if w < min_width:
        scale = min_width / float(w)
        bgr = cv2.resize(bgr, (int(w * scale), int(h * scale)), interpolation=cv2.INTER_CUBIC)
    elif w > max_width:
        scale = max_width / float(w)
        bgr = cv2.resize(bgr, (int(w * scale), max(1, int(h * scale))), interpolation=cv2.INTER_AREA)

    gray = cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY)

    # Wallet apps in dark mode: light text on dark background
    if invert_dark and float(gray.mean()) < 127.0:
        gray = cv2.bitwise_not(gray)

    gray = cv2.bilateralFilter(gray, d=7, sigmaColor=50, sigmaSpace=50)

    if do_threshold:
        _, gray = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)

    return Image.fromarray(gray)
