"""OpenAPI document endpoints.

Serves the documents listed in the document registry:
- GET /swagger/documents: known document names
- GET /swagger/{documentName}/swagger.json: one rendered document
- GET /swagger: Swagger UI over all documents
"""

import json

from fastapi import APIRouter, Depends, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, Response

from forecast_api.api.common.openapi import OpenApiDocumentRenderer
from forecast_api.api.dependencies import get_document_renderer
from forecast_api.exceptions import ResourceNotFoundError

router = APIRouter(prefix="/swagger", tags=["documents"])


def _document_url(request: Request, name: str) -> str:
    return request.url_for("get_openapi_document", document_name=name).path


@router.get("/documents", include_in_schema=False)
async def list_openapi_documents(
    request: Request,
    renderer: OpenApiDocumentRenderer = Depends(get_document_renderer),
) -> dict:
    """Return the names, titles and URLs of all registered documents."""
    return {
        "documents": [
            {
                "name": name,
                "title": renderer.registry[name].title,
                "url": _document_url(request, name),
            }
            for name in renderer.document_names()
        ]
    }


@router.get(
    "/{document_name}/swagger.json",
    name="get_openapi_document",
    include_in_schema=False,
)
async def get_openapi_document(
    document_name: str,
    renderer: OpenApiDocumentRenderer = Depends(get_document_renderer),
) -> Response:
    """Return the OpenAPI document as pretty-printed JSON."""
    document = renderer.render(document_name)
    if document is None:
        raise ResourceNotFoundError(f"OpenAPI document '{document_name}' not found")

    return Response(
        content=json.dumps(document, indent=2, ensure_ascii=False),
        media_type="application/json",
    )


@router.get("", include_in_schema=False)
async def swagger_ui(
    request: Request,
    renderer: OpenApiDocumentRenderer = Depends(get_document_renderer),
) -> HTMLResponse:
    """Interactive explorer with a document selector."""
    names = renderer.document_names()
    if not names:
        raise ResourceNotFoundError("No OpenAPI documents are registered")

    urls = [
        {"url": _document_url(request, name), "name": name.upper()} for name in names
    ]
    return get_swagger_ui_html(
        openapi_url=urls[0]["url"],
        title=renderer.registry[names[0]].title,
        swagger_ui_parameters={"urls": urls},
    )
