"""Calpay SDK - California State monthly pay period calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    SettingsError,
    OUTPUT_FORMATS,
)

from .patterns import (
    PatternRow,
    PATTERNS,
    PATTERN_SEQUENCE,
    PATTERN_SEED_YEAR,
    YEAR_MAX,
    HOURS_PER_WORK_DAY,
    get_pattern,
    resolve_pattern_number,
    resolve_year_patterns,
)

from .schemas import PayPeriod

from .periods import (
    get_pay_periods,
    get_pay_period,
    create_pay_period,
    validate_year,
    validate_month,
    PayPeriodError,
    OutOfRangeError,
    InvariantViolation,
)

__all__ = [
    # Settings
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "SettingsError",
    "OUTPUT_FORMATS",
    # Pattern tables
    "PatternRow",
    "PATTERNS",
    "PATTERN_SEQUENCE",
    "PATTERN_SEED_YEAR",
    "YEAR_MAX",
    "HOURS_PER_WORK_DAY",
    "get_pattern",
    "resolve_pattern_number",
    "resolve_year_patterns",
    # Pay periods
    "PayPeriod",
    "get_pay_periods",
    "get_pay_period",
    "create_pay_period",
    "validate_year",
    "validate_month",
    "PayPeriodError",
    "OutOfRangeError",
    "InvariantViolation",
]
