"""
Comparison routes for the config comparator.

Provides document comparison, format detection and flattening.
"""
import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from core import (
    ConfigComparatorError,
    compare_config_files,
    create_inline_diff,
    flatten_config,
    generate_report,
    generate_summary,
    parse_config,
    resolve_format,
)
from api.schemas import (
    ComparisonRequest,
    ComparisonResponse,
    DetectResponse,
    DocumentRequest,
    FlattenResponse,
    InlineDiffRequest,
    InlineDiffResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _unprocessable(error: ConfigComparatorError) -> HTTPException:
    """Translate a pipeline error into a 422 response."""
    return HTTPException(status_code=422, detail=str(error))


@router.post("", response_model=ComparisonResponse)
async def compare_configs(request: ComparisonRequest):
    """
    Compare two configuration documents and return differences.
    """
    try:
        result = compare_config_files(
            request.source_content,
            request.source_filename,
            request.target_content,
            request.target_filename,
            separator=request.separator
        )
    except ConfigComparatorError as e:
        raise _unprocessable(e)

    return ComparisonResponse.from_result(result, summary=generate_summary(result))


@router.post("/files", response_model=ComparisonResponse)
async def compare_files(
    source_file: UploadFile = File(...),
    target_file: UploadFile = File(...)
):
    """
    Compare two uploaded configuration files.
    """
    contents = {}
    for label, upload in (("Source", source_file), ("Target", target_file)):
        try:
            contents[label] = (await upload.read()).decode("utf-8-sig")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail=f"{label} file must be UTF-8 text")

    try:
        result = compare_config_files(
            contents["Source"],
            source_file.filename or "source",
            contents["Target"],
            target_file.filename or "target"
        )
    except ConfigComparatorError as e:
        raise _unprocessable(e)

    return ComparisonResponse.from_result(
        result,
        summary=generate_summary(result),
        report=generate_report(result)
    )


@router.post("/detect", response_model=DetectResponse)
async def detect(request: DocumentRequest):
    """
    Detect the format of a document, falling back to its extension.
    """
    try:
        config_format, format_source = resolve_format(request.content, request.filename)
    except ConfigComparatorError as e:
        raise _unprocessable(e)

    return DetectResponse(format=config_format.value, format_source=format_source)


@router.post("/flatten", response_model=FlattenResponse)
async def flatten(request: DocumentRequest):
    """
    Parse a document and return its flattened key/value pairs.
    """
    try:
        parsed = parse_config(request.content, request.filename)
    except ConfigComparatorError as e:
        raise _unprocessable(e)

    return FlattenResponse(
        format=parsed.format.value,
        flat=flatten_config(parsed.tree, separator=request.separator)
    )


@router.post("/inline-diff", response_model=InlineDiffResponse)
async def get_inline_diff(request: InlineDiffRequest):
    """
    Get inline diff highlighting for two values.

    Returns HTML with highlighted changes.
    """
    return create_inline_diff(request.old_value, request.new_value)
