"""
Configuration management using Pydantic Settings.

Environment variables:
- CLOCKFLOW_HEADER: Header line written before the rows
- CLOCKFLOW_HEADLINE_SEPARATOR: Separator used to join the parents column
- CLOCKFLOW_PROPERTY_DEFAULT: Value returned for absent properties
- CLOCKFLOW_AGENDA_FILES: Default documents, separated by os.pathsep
- CLOCKFLOW_TODO_KEYWORDS: Comma separated TODO keywords stripped from titles
- CLOCKFLOW_OUTPUT_ENCODING: Encoding of written CSV files
- CLOCKFLOW_LOG_LEVEL: Log level used by the batch command
"""
import os
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    DEFAULT_CSV_HEADER,
    DEFAULT_HEADLINE_SEPARATOR,
    DEFAULT_TODO_KEYWORDS
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLOCKFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # CSV Output
    csv_header: str = Field(default=DEFAULT_CSV_HEADER, alias="CLOCKFLOW_HEADER")
    headline_separator: str = Field(default=DEFAULT_HEADLINE_SEPARATOR)
    property_default: str = Field(default="")
    output_encoding: str = Field(default="utf-8")

    # Inputs
    agenda_files: str = Field(default="")
    todo_keywords: str = Field(default=",".join(DEFAULT_TODO_KEYWORDS))

    # Batch Command
    log_level: str = Field(default="WARNING")

    def get_agenda_files(self) -> List[str]:
        """Get default documents as a list."""
        return [path for path in self.agenda_files.split(os.pathsep) if path.strip()]

    def get_todo_keywords(self) -> List[str]:
        """Get TODO keywords as a list."""
        return [kw.strip() for kw in self.todo_keywords.split(',') if kw.strip()]

    def get_export_config(self) -> dict:
        """Get exporter configuration as dictionary."""
        return {
            'header': self.csv_header,
            'separator': self.headline_separator,
            'property_default': self.property_default,
            'encoding': self.output_encoding,
        }


# Global settings instance
settings = Settings()
