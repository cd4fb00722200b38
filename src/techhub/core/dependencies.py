from fastapi import Request

from techhub.repositories.framework_repository import FrameworkRepository


def get_framework_repository(request: Request) -> FrameworkRepository:
    # One store per application, created by create_app() and kept on app.state
    return request.app.state.framework_repository
