"""Oracle — валидация фидов, смешивание источников, цена collateral."""

from src.oracle.collateral_price import (
    CollateralPriceConfig,
    CollateralPriceResolver,
    cross_price,
)
from src.oracle.feed_reader import FeedReader, FeedReaderConfig, check_feed_reading
from src.oracle.price_blender import (
    blend_multi_source,
    median3,
    median_of,
    validate_all_within_bounds,
)

__all__ = [
    # Feed reader
    "FeedReader",
    "FeedReaderConfig",
    "check_feed_reading",
    # Price blender
    "median3",
    "median_of",
    "blend_multi_source",
    "validate_all_within_bounds",
    # Collateral price
    "CollateralPriceConfig",
    "CollateralPriceResolver",
    "cross_price",
]
