class ItemsException(Exception):
    """Base exception"""

    pass


class EmptyItemError(ItemsException):
    """Item text is missing, empty or whitespace only"""

    def __init__(self, message: str = "Item cannot be empty."):
        super().__init__(message)
        self.message = message


class ItemNotFoundError(ItemsException):
    """No item at the requested position"""

    def __init__(self, index: int):
        super().__init__(f"Item not found at index {index}")
        self.index = index
