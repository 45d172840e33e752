"""Конфигурация кодека внешних представлений."""

from dataclasses import dataclass
from typing import Final

import numpy as np


@dataclass(frozen=True)
class CodecConfig:
    """Конфигурация Codec.

    - default_native_dtype: numpy dtype для Encoding.NATIVE, если тип не
      задан явно и не выводится из операнда
    - accept_leading_plus: разрешить ведущий '+' в десятичной строке
    """
    default_native_dtype: type = np.int64
    accept_leading_plus: bool = True


DEFAULT_CODEC_CONFIG: Final[CodecConfig] = CodecConfig()
