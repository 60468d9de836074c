from fastapi import FastAPI

from lms_notifications.interfaces.api.routes import register_routes


def create_app() -> FastAPI:
    app = FastAPI(title="LMS Notifications")
    register_routes(app)
    return app


app = create_app()
