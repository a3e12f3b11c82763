"""
Request adapter - Maps the wire format used by the web front end onto the
format pipeline.

Request body keys: data, template, spec, fixJson.
Configured defaults apply only to keys the body omits; an empty template
falls back to three spaces like any other unrecognised name.
Responses are (status_code, body) pairs; any HTTP framework can send them.
"""

from typing import Any, Dict, Optional, Tuple

from .core.config import AppConfig
from .core.specs import DEFAULT_SPEC_TABLE
from .formatter.canonicalizer import Canonicalizer, IndentStyle
from .formatter.pipeline import FormatPipeline, FormatRequest, NO_DATA_ERROR, trim_input
from .utils.logger import get_logger, log_exception

logger = get_logger(__name__)


def build_pipeline(config: Optional[AppConfig] = None) -> FormatPipeline:
    """Create a pipeline wired from configuration."""
    config = config or AppConfig()
    return FormatPipeline(
        spec_table=DEFAULT_SPEC_TABLE,
        canonicalizer=Canonicalizer(ensure_ascii=config.formatter.ensure_ascii),
    )


def handle_format_request(
    body: Dict[str, Any],
    pipeline: Optional[FormatPipeline] = None,
    config: Optional[AppConfig] = None,
) -> Tuple[int, Dict[str, Any]]:
    """
    Handle one format request.

    Args:
        body: Decoded request body
        pipeline: Pipeline to run (built from config if None)
        config: Application configuration (defaults if None)

    Returns:
        Tuple of (status_code, response_body)
    """
    config = config or AppConfig()
    pipeline = pipeline or build_pipeline(config)

    try:
        if not isinstance(body, dict):
            return 400, {"success": False, "error": "Request body must be a JSON object"}

        data = body.get("data")
        if not isinstance(data, str) or not trim_input(data):
            return 400, {"success": False, "error": NO_DATA_ERROR}

        size = len(data.encode("utf-8"))
        if size > config.api.max_payload_bytes:
            logger.warning(f"Rejected payload of {size} bytes")
            return 413, {
                "success": False,
                "error": f"Payload exceeds {config.api.max_payload_bytes} bytes",
            }

        request = FormatRequest(
            text=data,
            spec_name=body.get("spec", config.formatter.default_spec),
            indent_style=body.get("template", config.formatter.default_template),
            repair=bool(body.get("fixJson", config.formatter.repair)),
        )

        result = pipeline.run(request)
        return 200, result.to_dict()

    except Exception as e:
        log_exception(logger, "Format request failed", e)
        return 500, {"success": False, "error": str(e)}


def list_options(config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """
    Describe the selectable options for a front end.

    Returns:
        Spec names, template names and the configured defaults
    """
    config = config or AppConfig()
    return {
        "specs": DEFAULT_SPEC_TABLE.names(),
        "templates": IndentStyle.names(),
        "defaults": {
            "spec": config.formatter.default_spec,
            "template": config.formatter.default_template,
            "fixJson": config.formatter.repair,
        },
    }
