"""
Logging configuration for tinypipe using loguru with Rich integration.
"""

from typing import Any
from pathlib import Path
from loguru import logger
from rich.logging import RichHandler
from rich.console import Console

from tinypipe.config.types import LogConfig

# Global console instance for Rich integration
console = Console(stderr=True)

_is_configured = False

def configure_logging(config: LogConfig, force: bool = False) -> None:
    """
    Configure logging with loguru and Rich integration.
    
    Args:
        config: Logging configuration
        force: Reconfigure even if logging was already set up
    """
    global _is_configured
    
    if _is_configured and not force:
        return
    
    # Remove default handler
    logger.remove()
    
    # Rich renders time and level itself, so only the message goes through
    logger.add(
        RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        ),
        level=config["level"],
        format="{message}",
    )
    
    # Add file logging if specified
    if config.get("file"):
        file_path = Path(config["file"])
        file_path.parent.mkdir(parents=True, exist_ok=True)
        
        logger.add(
            str(file_path),
            level=config["level"],
            format=config["format"],
            rotation="10 MB",
            retention="7 days",
        )
    
    # The package disables its own records on import
    logger.enable("tinypipe")

    _is_configured = True

def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    return logger.bind(name=name)
