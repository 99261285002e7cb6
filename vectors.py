import logging
from typing import List, Tuple

import numpy as np

from errors import InvalidFormat
from rational import Rat64

LOG = logging.getLogger(__name__)

ALLOWED_CHARS = set("0123456789.,[]- \t\r\n")

Vector = List[Rat64]

class ParseError(ValueError):
    pass

def load_text_strict(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        s = f.read().strip()
    if any(c not in ALLOWED_CHARS for c in s):
        bad = sorted(set(c for c in s if c not in ALLOWED_CHARS))
        raise ParseError(f"Illegal character(s) found: {bad}. Allowed are only 0-9 . , [ ] - and whitespace")
    if not s:
        raise ParseError("Empty file.")
    return s

def parse_vector(s: str) -> Vector:
    """
    Parse "[d, d, ...]" where each d is a decimal literal accepted by
    Rat64.parse_decimal. Whitespace around entries is ignored.
    """
    body = s.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise ParseError("Expected a vector enclosed in '[' and ']'")
    body = body[1:-1].strip()
    if not body:
        return []
    vec = []
    for idx, item in enumerate(body.split(",")):
        try:
            vec.append(Rat64.parse_decimal(item.strip()))
        except InvalidFormat as e:
            raise ParseError(f"Entry {idx}: {e}") from e
    return vec

def load_vector_from_file(path: str) -> Vector:
    vec = parse_vector(load_text_strict(path))
    LOG.info("loaded %d rationals from %s", len(vec), path)
    return vec

def from_float64_array(arr) -> Vector:
    """Exact Rat64 for every entry of a float array (any shape, row-major order)."""
    arr = np.asarray(arr)
    if arr.dtype.kind != "f":
        raise TypeError(f"Unsupported dtype: {arr.dtype!r}")
    if arr.dtype.itemsize > 8:
        raise TypeError(f"Unsupported dtype: {arr.dtype!r} is wider than float64")
    f64 = arr.astype(np.float64, copy=False).ravel()
    if not np.isfinite(f64).all():
        raise ValueError("NaN/Inf encountered; cannot convert to Rat64.")
    return [Rat64.from_float64(float(x)) for x in f64]

def to_float64_array(values: Vector) -> Tuple[np.ndarray, np.ndarray]:
    """(values as float64, per-entry exactness mask)."""
    out = np.empty(len(values), dtype=np.float64)
    exact = np.empty(len(values), dtype=bool)
    for i, x in enumerate(values):
        out[i], exact[i] = x.to_float64()
    return out, exact

def load_vector_from_npy_file(path: str) -> Vector:
    arr = np.load(path, allow_pickle=False)
    vec = from_float64_array(arr)
    LOG.info("loaded %d rationals from %s (dtype %s)", len(vec), path, arr.dtype)
    return vec
