"""
Proximity conditions for document (geo-near) and relational (earthdistance) stores.
Distances come in as km and are emitted as meters, which both query languages expect.
"""
import logging
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from geonear.models import DbType, NearbyConditionOptions
from geonear.settings import get_settings

logger = logging.getLogger(__name__)

# Optional table qualifier, e.g. "spots.lat"
COLUMN_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class UnsupportedBackendError(ValueError):
    """Raised when the backend selector is not a known DbType."""


def _resolve_db_type(db_type: DbType | str) -> DbType:
    try:
        return DbType(db_type)
    except ValueError:
        logger.warning("telemetry unsupported_backend db_type=%r", db_type)
        raise UnsupportedBackendError(f"Unsupported dbType: {db_type}") from None


def _coerce_options(options: NearbyConditionOptions | Mapping[str, Any]) -> NearbyConditionOptions:
    if isinstance(options, NearbyConditionOptions):
        return options
    return NearbyConditionOptions.model_validate(options)


def _column_names(options: NearbyConditionOptions) -> tuple[str, str]:
    settings = get_settings()
    lat_col = options.latitude_column_name or settings.latitude_column_name
    lng_col = options.longitude_column_name or settings.longitude_column_name
    return lat_col, lng_col


def _format_number(value: float) -> str:
    """
    Shortest round-trip rendering: integral values carry no fraction and
    exponent notation is used only outside [1e-6, 1e21).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        e = n - 1
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + body


def _document_condition(options: NearbyConditionOptions, max_distance_m: float) -> dict[str, Any]:
    return {
        "$near": {
            "$geometry": {
                "type": "Point",
                "coordinates": [options.longitude, options.latitude],
            },
            "$maxDistance": max_distance_m,
        }
    }


def _relational_condition(options: NearbyConditionOptions, max_distance_m: float) -> str:
    lat_col, lng_col = _column_names(options)
    center = f"ll_to_earth({_format_number(options.latitude)}, {_format_number(options.longitude)})"
    row = f"ll_to_earth({lat_col}, {lng_col})"
    meters = _format_number(max_distance_m)
    return (
        f"earth_box({center}, {meters}) @> {row}"
        f" and earth_distance({center}, {row}) <= {meters}"
    )


def get_nearby_condition(
    options: NearbyConditionOptions | Mapping[str, Any],
    db_type: DbType | str,
) -> dict[str, Any] | str:
    """
    Build a proximity filter for the given backend.

    DOCUMENT returns a $near filter with a GeoJSON Point ([lng, lat] order).
    RELATIONAL returns an earth_box/earth_distance SQL fragment with values
    interpolated literally; use get_nearby_condition_params for bound values.
    Raises UnsupportedBackendError for any other selector.
    """
    backend = _resolve_db_type(db_type)
    opts = _coerce_options(options)
    max_distance_m = opts.max_distance * 1000

    if backend is DbType.DOCUMENT:
        return _document_condition(opts, max_distance_m)
    return _relational_condition(opts, max_distance_m)


def get_nearby_condition_params(
    options: NearbyConditionOptions | Mapping[str, Any],
) -> tuple[str, dict[str, float]]:
    """
    Relational condition with named placeholders (:center_lat, :center_lng,
    :max_distance_m) and the values to bind. Column names are interpolated,
    so they must be plain or table-qualified identifiers.
    """
    opts = _coerce_options(options)
    lat_col, lng_col = _column_names(opts)
    for col in (lat_col, lng_col):
        if not COLUMN_NAME_PATTERN.match(col):
            raise ValueError(f"Invalid column name: {col!r}")

    center = "ll_to_earth(:center_lat, :center_lng)"
    row = f"ll_to_earth({lat_col}, {lng_col})"
    sql = (
        f"earth_box({center}, :max_distance_m) @> {row}"
        f" and earth_distance({center}, {row}) <= :max_distance_m"
    )
    params = {
        "center_lat": opts.latitude,
        "center_lng": opts.longitude,
        "max_distance_m": opts.max_distance * 1000,
    }
    return sql, params
