from dataclasses import dataclass

import numpy as np

@dataclass(frozen=True)
class FloatFormat:
    name: str
    p: int              # precision in bits (incl. implicit 1)
    emin: int           # minimum normal exponent (unbiased)
    emax: int           # maximum finite exponent (unbiased)
    dtype: type         # numpy scalar type holding values of this format

# IEEE-754 binary formats with a numpy scalar type (unbiased exponent bounds):
# - binary16:   p=11,  emin = -14,   emax = 15
# - binary32:   p=24,  emin = -126,  emax = 127
# - binary64:   p=53,  emin = -1022, emax = 1023
_REGISTRY = {
    "float16":   (11,  -14,   15,   np.float16),
    "fp16":      (11,  -14,   15,   np.float16),
    "binary16":  (11,  -14,   15,   np.float16),
    "half":      (11,  -14,   15,   np.float16),

    "float32":   (24,  -126,  127,  np.float32),
    "fp32":      (24,  -126,  127,  np.float32),
    "binary32":  (24,  -126,  127,  np.float32),
    "single":    (24,  -126,  127,  np.float32),

    "float64":   (53,  -1022, 1023, np.float64),
    "fp64":      (53,  -1022, 1023, np.float64),
    "binary64":  (53,  -1022, 1023, np.float64),
    "double":    (53,  -1022, 1023, np.float64),
}

def get_float_format(name: str) -> FloatFormat:
    key = (name or "float64").lower()
    try:
        p, emin, emax, dtype = _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {sorted(_REGISTRY)}")
    return FloatFormat(name=key, p=p, emin=emin, emax=emax, dtype=dtype)

FLOAT64 = get_float_format("float64")
