"""
Общие аннотированные типы для Pydantic моделей.

Uint256 — строгий int (без coercion из float/str) в диапазоне uint256.
"""

from typing import Annotated

from pydantic import Field

from src.core.math.constants import BPS_BASE, MAX_UINT256

Uint256 = Annotated[int, Field(strict=True, ge=0, le=MAX_UINT256)]

Bps = Annotated[int, Field(strict=True, ge=0, le=BPS_BASE)]
