"""Custom metrics for the restaurant menu service."""

from opentelemetry import metrics

meter = metrics.get_meter("menu-svc")

translation_request_counter = meter.create_counter(
    name="menu_translation_requests_total",
    description="Total number of calls made to the translation provider",
    unit="1",
)

translation_failure_counter = meter.create_counter(
    name="menu_translation_failures_total",
    description="Total number of translation calls that yielded no usable result",
    unit="1",
)

translation_skipped_counter = meter.create_counter(
    name="menu_translation_skipped_total",
    description="Saves that needed no translation call because every slot was filled",
    unit="1",
)

catalog_save_counter = meter.create_counter(
    name="menu_catalog_saves_total",
    description="Catalog document writes by outcome",
    unit="1",
)

translation_duration_histogram = meter.create_histogram(
    name="menu_translation_duration_seconds",
    description="Duration of translation provider calls",
    unit="s",
)


def record_translation_request(provider: str) -> None:
    """Record a call made to the translation provider.

    Args:
        provider: Translation provider name (e.g., "gemini")
    """
    translation_request_counter.add(1, {"provider": provider})


def record_translation_failure(error_type: str) -> None:
    """Record a translation call that produced no usable result.

    Args:
        error_type: Kind of failure (e.g., "provider_error", "malformed_response")
    """
    translation_failure_counter.add(1, {"error_type": error_type})


def record_translation_skipped(field: str) -> None:
    """Record a save whose text was already translation-complete.

    Args:
        field: The record field that needed no translation
    """
    translation_skipped_counter.add(1, {"field": field})


def record_catalog_save(success: bool) -> None:
    """Record a catalog document write.

    Args:
        success: Whether the durable store accepted the write
    """
    catalog_save_counter.add(1, {"success": str(success).lower()})


def record_translation_duration(duration_seconds: float) -> None:
    """Record the duration of a translation provider call.

    Args:
        duration_seconds: Duration in seconds
    """
    translation_duration_histogram.record(duration_seconds)
