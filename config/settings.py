#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

from .constants import (
    API_RATE_LIMIT, LASSO_MIN_POINTS, LASSO_SELECTABLE_TYPES,
    LOG_LEVEL, MATH_MAX_VARIABLES, MAX_TEXT_LENGTH,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Logging ==========
    log_level: str = LOG_LEVEL  # DEBUG | INFO | WARNING | ERROR

    # ========== Math Text ==========
    max_text_length: int = MAX_TEXT_LENGTH
    math_max_variables: int = MATH_MAX_VARIABLES
    merge_segments: bool = False  # collapse same-type neighbours in API output

    # ========== Board ==========
    lasso_min_points: int = LASSO_MIN_POINTS
    lasso_selectable_types: List[str] = list(LASSO_SELECTABLE_TYPES)

    # ========== API ==========
    rate_limit: str = API_RATE_LIMIT
    cors_origins: List[str] = ["*"]

    # ========== Directories ==========
    logs_dir: Path = BASE_DIR / "logs"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.logs_dir.mkdir(exist_ok=True, parents=True)

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "=" * 60)
        print("CONFIGURATION")
        print("=" * 60)
        print(f"Log Level:        {self.log_level}")
        print(f"Max Text Length:  {self.max_text_length}")
        print(f"Max Variables:    {self.math_max_variables}")
        print(f"Merge Segments:   {self.merge_segments}")
        print(f"Lasso Min Points: {self.lasso_min_points}")
        print(f"Lasso Types:      {', '.join(self.lasso_selectable_types)}")
        print(f"Rate Limit:       {self.rate_limit}")
        print("=" * 60 + "\n")


# Global settings instance
settings = Settings()
