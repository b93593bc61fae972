from fastapi import Request

from stores import MemStorage


def get_storage(request: Request) -> MemStorage:
    # Built by the app lifespan hook, one per process
    return request.app.state.storage


def get_settings(request: Request):
    return request.app.state.settings
