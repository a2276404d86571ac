"""HTTP trigger blueprint — health check and folder path endpoints."""

import json
import logging

import azure.functions as func

from mfws_folders import __version__
from mfws_folders.config import load_config
from mfws_folders.vault.listing import parse_folder_content_item
from mfws_folders.vault.models import InvalidFolderContentItemError
from mfws_folders.vault.ordering import sort_items
from mfws_folders.vault.paths import display_name, item_path, items_path, items_resource_path

logger = logging.getLogger(__name__)

bp = func.Blueprint()


def _error_response(message: str, status_code: int) -> func.HttpResponse:
    body = json.dumps({"status": "error", "message": message})
    return func.HttpResponse(body, status_code=status_code, mimetype="application/json")


@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint.

    Returns service status and version.
    """
    logger.info("[health_check] health check requested")

    try:
        body = json.dumps({"status": "ok", "version": __version__})
        return func.HttpResponse(body, status_code=200, mimetype="application/json")

    except Exception:
        logger.error("[health_check] health check failed", exc_info=True)
        return _error_response("Internal server error", 500)


@bp.route(route="folders/path", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
def folder_path(req: func.HttpRequest) -> func.HttpResponse:
    """Encode a posted folder location and describe its entries.

    Expects ``{"items": [<MFWS FolderContentItem>, ...]}`` ordered from the
    outermost view inwards. Responds with the MFWS view path, the request
    path for listing that location, and the entries with their display
    names and path tokens (in folder-first order unless disabled).
    """
    logger.info("[folder_path] folder path requested")

    try:
        try:
            payload = req.get_json()
        except ValueError:
            logger.warning("[folder_path] request body is not valid JSON")
            return _error_response("Request body must be JSON", 400)

        raw_items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(raw_items, list):
            logger.warning("[folder_path] request body has no items list")
            return _error_response("Request body must contain an 'items' list", 400)

        try:
            items = [parse_folder_content_item(raw) for raw in raw_items]
        except InvalidFolderContentItemError as exc:
            logger.warning("[folder_path] invalid folder content item; error:%s", exc)
            return _error_response(str(exc), 400)

        config = load_config()
        entries = sort_items(items) if config.sort_listings else items
        results = [
            {
                "display_name": display_name(item),
                "path": item_path(item),
                "type": int(item.folder_content_item_type),
            }
            for item in entries
            if item is not None
        ]
        path = items_path(items)
        logger.info("[folder_path] encoded location; path:%s;item_count:%d", path, len(items))

        body = json.dumps(
            {
                "status": "ok",
                "path": path,
                "resource": items_resource_path(
                    items,
                    views_resource=config.views_resource,
                    items_resource=config.items_resource,
                ),
                "items": results,
            }
        )
        return func.HttpResponse(body, status_code=200, mimetype="application/json")

    except Exception:
        logger.error("[folder_path] folder path request failed", exc_info=True)
        return _error_response("Internal server error", 500)
