import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from api.deps import get_item_store
from core.exceptions import EmptyItemError, ItemNotFoundError
from schemas.item import ErrorResponse, ProblemDetails
from services.item_store import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter()

EMPTY_ITEM_MESSAGE = "Item cannot be empty."
NOT_FOUND_MESSAGE = "Item not found."

BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
PROBLEM_RESPONSE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ProblemDetails,
        "content": {"application/problem+json": {}},
    }
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


def problem_response(detail: str) -> JSONResponse:
    """Generic 500 for unexpected failures caught inside a handler"""
    problem = ProblemDetails(detail=detail)
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        media_type="application/problem+json",
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=str,
    responses={**BAD_REQUEST_RESPONSE, **PROBLEM_RESPONSE},
)
async def create_item(
    store: Annotated[ItemStore, Depends(get_item_store)],
    item: str | None = None,
):
    """Append an item; the Location header points at its position"""
    try:
        index = store.add(item)
    except EmptyItemError:
        return error_response(status.HTTP_400_BAD_REQUEST, EMPTY_ITEM_MESSAGE)
    except Exception as e:
        logger.error(f"Failed to create item: {e}")
        return problem_response("An error occurred while creating the item.")

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=item,
        headers={"Location": f"/items/{index}"},
    )


@router.get("", response_model=list[str], responses=PROBLEM_RESPONSE)
async def list_items(store: Annotated[ItemStore, Depends(get_item_store)]):
    """Return a snapshot of all items in insertion order"""
    try:
        return JSONResponse(content=store.list_items())
    except Exception as e:
        logger.error(f"Failed to list items: {e}")
        return problem_response("An error occurred while retrieving items.")


@router.get(
    "/{item_id}",
    response_model=str,
    responses={**NOT_FOUND_RESPONSE, **PROBLEM_RESPONSE},
)
async def get_item(
    item_id: int,
    store: Annotated[ItemStore, Depends(get_item_store)],
):
    try:
        return JSONResponse(content=store.get(item_id))
    except ItemNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Failed to get item {item_id}: {e}")
        return problem_response("An error occurred while retrieving the item.")


@router.put(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE, **PROBLEM_RESPONSE},
)
async def update_item(
    item_id: int,
    store: Annotated[ItemStore, Depends(get_item_store)],
    updated_item: Annotated[str | None, Query(alias="updatedItem")] = None,
):
    """Replace the item at a position"""
    try:
        store.update(item_id, updated_item)
    except EmptyItemError:
        return error_response(status.HTTP_400_BAD_REQUEST, EMPTY_ITEM_MESSAGE)
    except ItemNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Failed to update item {item_id}: {e}")
        return problem_response("An error occurred while updating the item.")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND_RESPONSE, **PROBLEM_RESPONSE},
)
async def delete_item(
    item_id: int,
    store: Annotated[ItemStore, Depends(get_item_store)],
):
    """Remove the item at a position; later items shift down by one"""
    try:
        store.delete(item_id)
    except ItemNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.error(f"Failed to delete item {item_id}: {e}")
        return problem_response("An error occurred while deleting the item.")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
