"""
Configuration settings for the DPS parser.

Handles environment variables for parsing, server and upload settings.
"""

import os
import logging
from typing import List
from dataclasses import dataclass, field


@dataclass
class ParserSettings:
    """Log parsing settings."""

    # Logs with more lines than this are aggregated in parallel
    parallel_threshold: int = 50000
    max_workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    chunk_size: int = 20000

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        return cls(
            parallel_threshold=int(os.getenv("DPS_PARALLEL_THRESHOLD", "50000")),
            max_workers=int(os.getenv("DPS_MAX_WORKERS", str(os.cpu_count() or 1))),
            chunk_size=int(os.getenv("DPS_CHUNK_SIZE", "20000")),
        )


@dataclass
class ServerSettings:
    """Server configuration settings."""

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ServerSettings":
        """Load server settings from environment variables."""
        return cls(
            host=os.getenv("PARSER_HOST", "0.0.0.0"),
            port=int(os.getenv("PARSER_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
        )


@dataclass
class UploadSettings:
    """File upload configuration settings."""

    max_file_size: int = 104857600  # 100MB
    allowed_extensions: List[str] = field(default_factory=lambda: [".txt", ".csv", ".log"])

    @classmethod
    def from_env(cls) -> "UploadSettings":
        """Load upload settings from environment variables."""
        return cls(
            max_file_size=int(os.getenv("MAX_FILE_SIZE", "104857600")),
        )

    def is_allowed(self, file_name: str) -> bool:
        return any(file_name.lower().endswith(ext) for ext in self.allowed_extensions)


@dataclass
class ApplicationSettings:
    """Main application settings container."""

    parser: ParserSettings
    server: ServerSettings
    upload: UploadSettings

    # Runtime settings
    environment: str = "development"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ApplicationSettings":
        """Load all settings from environment variables."""
        return cls(
            parser=ParserSettings.from_env(),
            server=ServerSettings.from_env(),
            upload=UploadSettings.from_env(),
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() in ("production", "prod")

    def setup_logging(self):
        """Configure logging based on settings."""
        level = getattr(logging, self.server.log_level.upper(), logging.INFO)
        if self.debug:
            level = logging.DEBUG

        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def validate(self):
        """Validate configuration settings."""
        errors = []

        if self.parser.chunk_size < 1:
            errors.append(f"Invalid chunk size: {self.parser.chunk_size}")

        if self.parser.max_workers < 1:
            errors.append(f"Invalid worker count: {self.parser.max_workers}")

        if self.parser.parallel_threshold < 0:
            errors.append(f"Invalid parallel threshold: {self.parser.parallel_threshold}")

        if not (1 <= self.server.port <= 65535):
            errors.append(f"Invalid port number: {self.server.port}")

        if self.upload.max_file_size < 1:
            errors.append(f"Invalid max file size: {self.upload.max_file_size}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def log_configuration(self):
        """Log current configuration."""
        logger = logging.getLogger(__name__)

        logger.info("=== DPS Parser Configuration ===")
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug Mode: {self.debug}")

        # Parser
        logger.info(f"Parallel Threshold: {self.parser.parallel_threshold} lines")
        logger.info(f"Workers: {self.parser.max_workers}")
        logger.info(f"Chunk Size: {self.parser.chunk_size} lines")

        # Server
        logger.info(f"Server: {self.server.host}:{self.server.port}")
        logger.info(f"Log Level: {self.server.log_level}")

        # Upload
        logger.info(f"Max File Size: {self.upload.max_file_size / (1024 * 1024):.1f}MB")
        logger.info(f"Allowed Extensions: {', '.join(self.upload.allowed_extensions)}")

        logger.info("=== End Configuration ===")


# Global settings instance
settings = ApplicationSettings.from_env()


def get_settings() -> ApplicationSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> ApplicationSettings:
    """Reload settings from environment variables."""
    global settings
    settings = ApplicationSettings.from_env()
    return settings