from fastapi import Request

from services.item_store import ItemStore


def get_item_store(request: Request) -> ItemStore:
    """
    Item store dependency

    Returns the store attached to the application in main.create_app,
    shared by every request the application serves.
    """
    return request.app.state.item_store
