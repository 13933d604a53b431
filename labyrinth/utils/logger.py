"""
Structured Logger Module

Configures structlog for JSON-formatted structured logging with correlation IDs.
Every scoring pass, record load and coordinator run logs through this module.

Example Usage:
    from labyrinth.utils.logger import get_logger

    logger = get_logger(
        correlation_id="a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        phase="ranking",
        component="match_ranker"
    )

    logger.info("Ranking complete", candidates=40, matches=12)
    logger.warning("Component degraded", component_name="gpa_consideration")

Log Levels:
    - DEBUG: Per-candidate scores and filter decisions
    - INFO: Scoring pass summaries, records loaded, matches saved
    - WARNING: Degraded components, skipped records
    - ERROR: Unreadable record files
"""

import logging
import sys
import uuid
from pathlib import Path
from typing import Optional
import structlog
from structlog.types import BindableLogger, EventDict, WrappedLogger


def mask_contact_details(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Processor to mask student and faculty contact details in log output.

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with masked contact details

    Masks:
        - email, phone, contact fields (e.g. "student_email", "phone-number")
        - Replaces values with "***MASKED***"
    """
    sensitive_fields = {"email", "phone", "contact"}

    for key in list(event_dict.keys()):
        key_lower = key.lower()
        for sensitive in sensitive_fields:
            if (
                key_lower == sensitive
                or key_lower.endswith(f"_{sensitive}")
                or key_lower.endswith(f"-{sensitive}")
                or key_lower.startswith(f"{sensitive}_")
                or key_lower.startswith(f"{sensitive}-")
            ):
                event_dict[key] = "***MASKED***"
                break

    return event_dict


def configure_logging(
    log_file: Optional[str] = None, log_level: str = "INFO"
) -> None:
    """
    Configure structlog with JSON output, optionally mirrored to a log file.

    Args:
        log_file: Path to log file (default: None, stderr only)
        log_level: Logging level (default: "INFO")

    Log Format (JSON):
        {
            "timestamp": "2026-03-02T10:30:45Z",
            "level": "info",
            "correlation_id": "a1b2c3d4-...",
            "phase": "ranking",
            "component": "match_ranker",
            "event": "Ranking complete",
            "matches": 12
        }
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_contact_details,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    correlation_id: Optional[str] = None,
    phase: Optional[str] = None,
    component: Optional[str] = None,
) -> BindableLogger:
    """
    Get structured logger with bound context.

    Args:
        correlation_id: Correlation ID for request tracing (generates UUID if not provided)
        phase: Pipeline phase (e.g., "ranking", "record_store")
        component: Component name (e.g., "match_ranker", "match_coordinator")

    Returns:
        BoundLogger with correlation_id, phase, and component bound to context
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    logger = structlog.get_logger()

    if correlation_id:
        logger = logger.bind(correlation_id=correlation_id)
    if phase:
        logger = logger.bind(phase=phase)
    if component:
        logger = logger.bind(component=component)

    return logger


# Initialize logging on module import with default settings
configure_logging()
